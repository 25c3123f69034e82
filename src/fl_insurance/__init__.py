"""fl_insurance package.

Contains modules for reading the zipped Florida insurance CSV, parsing it into
validated records, computing summary aggregates and writing them to flat
output files.

Architecture:
- Archive → Records → Aggregates → Output files
- pandas is used for the grouped growth ranking
- Pydantic models validate parsed records and ranked rows
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
