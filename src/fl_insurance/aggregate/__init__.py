"""Summary aggregation helpers.

This package turns the in-memory record list into the three summary values
(distinct counties, 2012 total insured value, top growth counties) and
persists each one to its own flat file.
"""
