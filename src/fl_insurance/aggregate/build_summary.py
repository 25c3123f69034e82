"""Summary aggregation functions.

Each function is a pure function of the record list: no file I/O and no
shared state, so the three summaries can be computed and tested
independently.

Expectations:
- Input: ordered sequence of `InsuranceRecord`
- Outputs: plain Python values or `CountyGrowth` rows, documented on each
  function docstring.
"""
from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Sequence

import pandas as pd

from fl_insurance.config import TOP_N
from fl_insurance.models import CountyGrowth, InsuranceRecord

TWO_PLACES = Decimal("0.01")
# enough digits for any finite double at two decimal places
DECIMAL_PRECISION = 400


def records_to_frame(records: Sequence[InsuranceRecord]) -> pd.DataFrame:
    """Return the records as a DataFrame with `county`, `tiv2011`, `tiv2012`."""
    return pd.DataFrame(
        {
            "county": [r.county for r in records],
            "tiv2011": [r.tiv2011 for r in records],
            "tiv2012": [r.tiv2012 for r in records],
        },
        columns=["county", "tiv2011", "tiv2012"],
    )


def count_counties(records: Sequence[InsuranceRecord]) -> int:
    """Return the number of distinct county labels.

    Labels are compared as exact, case-sensitive strings.
    """
    return len({r.county for r in records})


def total_tiv2012(records: Sequence[InsuranceRecord]) -> float:
    """Return the sum of `tiv2012` over all records, in record order."""
    return sum((r.tiv2012 for r in records), 0.0)


def top_growth_counties(
    records: Sequence[InsuranceRecord],
    top_n: int = TOP_N,
) -> list[CountyGrowth]:
    """Return the counties with the largest 2011→2012 insured value growth.

    Growth is `tiv2012 - tiv2011` summed over a county's records and may be
    negative. Ties keep the order in which counties first appear.

    Args:
        records: Parsed records.
        top_n: Maximum number of counties to return (default 10).

    Returns:
        Up to `top_n` `CountyGrowth` rows sorted by growth, descending.
    """
    if top_n < 0:
        raise ValueError("top_n must be non-negative")

    pdf = records_to_frame(records)
    if pdf.empty:
        return []

    pdf["growth"] = pdf["tiv2012"] - pdf["tiv2011"]
    ranked = (
        pdf.groupby("county", sort=False)["growth"]
        .sum()
        .sort_values(ascending=False, kind="stable")
        .head(top_n)
    )
    return [
        CountyGrowth(county=str(county), growth=float(growth))
        for county, growth in ranked.items()
    ]


def format_growth(value: float) -> str:
    """Format a growth value with two decimals, rounding half away from zero.

    The exact binary value is rounded, so the result does not depend on the
    locale or on float repr artifacts. A growth sum that overflowed renders
    as `Infinity`, `-Infinity` or `NaN`.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    with localcontext() as ctx:
        ctx.prec = DECIMAL_PRECISION
        return f"{Decimal(value).quantize(TWO_PLACES, rounding=ROUND_HALF_UP)}"
