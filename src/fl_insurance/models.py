"""Pydantic models for parsed records and ranked outputs."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class InsuranceRecord(BaseModel):
    """One policy line of the Florida insurance dataset.

    Attributes:
        tiv2011: Total insured value in 2011.
        tiv2012: Total insured value in 2012.
        county: County label, compared as an exact string.
    """
    model_config = ConfigDict(extra="forbid", frozen=True, allow_inf_nan=False)
    tiv2011: float
    tiv2012: float
    county: str


class CountyGrowth(BaseModel):
    """Aggregated 2011→2012 insured value growth for one county."""
    model_config = ConfigDict(extra="forbid", frozen=True)
    county: str
    growth: float
