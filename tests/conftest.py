from __future__ import annotations

import zipfile
from pathlib import Path
from typing import Callable

import pytest

from fl_insurance.config import DATA_FILE, DATA_FILE_ZIP

HEADER = (
    "policyID,statecode,county,eq_site_limit,hu_site_limit,fl_site_limit,"
    "fr_site_limit,tiv_2011,tiv_2012,eq_site_deductible,hu_site_deductible,"
    "fl_site_deductible,fr_site_deductible,point_latitude,point_longitude,"
    "line,construction,point_granularity"
)


def csv_line(policy_id: int, county: str, tiv2011: float, tiv2012: float) -> str:
    """Return a full-width dataset line with the given county and insured values."""
    return (
        f"{policy_id},FL,{county},0,0,0,0,{tiv2011},{tiv2012},"
        "0,0,0,0,30.1,-81.7,Residential,Wood,1"
    )


def corrupt_payload(path: Path, entry: str = DATA_FILE) -> None:
    """XOR bytes inside the deflate stream of the first member of `path`."""
    data = bytearray(path.read_bytes())
    start = 30 + len(entry.encode("utf-8"))
    for i in range(start + 2, start + 40):
        data[i] ^= 0xFF
    path.write_bytes(bytes(data))


@pytest.fixture
def sample_lines() -> list[str]:
    return [
        HEADER,
        csv_line(1, "A", 100, 150),
        csv_line(2, "B", 200, 180),
        csv_line(3, "A", 50, 80),
    ]


@pytest.fixture
def make_archive(tmp_path: Path) -> Callable[..., Path]:
    """Write a zip archive into `tmp_path` holding `lines` under `entry`."""

    def _make(
        lines: list[str],
        entry: str = DATA_FILE,
        name: str = DATA_FILE_ZIP,
        newline: str = "\n",
    ) -> Path:
        path = tmp_path / name
        with zipfile.ZipFile(path, "w", compression=zipfile.ZIP_DEFLATED) as zf:
            zf.writestr(entry, newline.join(lines) + newline)
        return path

    return _make
