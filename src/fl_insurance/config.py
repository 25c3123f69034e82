"""Configuration helpers and Settings container.

This module provides a small `Settings` dataclass and `get_settings` which
resolves the fixed input/output file names against a base directory. The
environment is not consulted; the file names are constants of the dataset.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

DATA_FILE_ZIP = "FL_insurance.csv.zip"
DATA_FILE = "FL_insurance.csv"
COUNT_FILE = "count.txt"
TIV2012_FILE = "tiv2012.txt"
MOST_VALUABLE_FILE = "most_valuable.txt"
TOP_N = 10


@dataclass(frozen=True)
class Settings:
    """Container for pipeline file locations.

    Attributes:
        data_zip: Path to the zipped input dataset.
        data_entry: Name of the CSV entry inside the archive.
        count_file: Output path for the distinct county count.
        tiv2012_file: Output path for the 2012 total insured value.
        most_valuable_file: Output path for the top growth counties.
        top_n: Number of counties kept in the growth ranking.
    """
    data_zip: Path
    data_entry: str
    count_file: Path
    tiv2012_file: Path
    most_valuable_file: Path
    top_n: int = TOP_N


def get_settings(base_dir: Path | None = None) -> Settings:
    """Return a frozen `Settings` object rooted at `base_dir`.

    Args:
        base_dir: Directory holding the archive and receiving the outputs.
            Defaults to the current working directory.
    """
    root = base_dir if base_dir is not None else Path.cwd()
    return Settings(
        data_zip=root / DATA_FILE_ZIP,
        data_entry=DATA_FILE,
        count_file=root / COUNT_FILE,
        tiv2012_file=root / TIV2012_FILE,
        most_valuable_file=root / MOST_VALUABLE_FILE,
    )
