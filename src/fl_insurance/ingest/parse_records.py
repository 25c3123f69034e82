"""Parsing helpers for the Florida insurance CSV payload.

The payload is split on bare commas (no quoting or trimming) and values are
taken from fixed column positions. The whole load fails on the first
malformed line; no partial record list is ever returned.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterable

from pydantic import ValidationError

from fl_insurance.errors import ArchiveReadError, RecordParseError
from fl_insurance.ingest.read_archive import READ_ERRORS, open_archive_entry
from fl_insurance.models import InsuranceRecord

log = logging.getLogger(__name__)

COUNTY_COL = 2
TIV2011_COL = 7
TIV2012_COL = 8
MIN_FIELDS = max(COUNTY_COL, TIV2011_COL, TIV2012_COL) + 1
DECIMAL_RE = re.compile(r"\s*[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?\s*", re.ASCII)


def parse_line(line: str, line_number: int) -> InsuranceRecord:
    """Parse one CSV data line into an `InsuranceRecord`.

    Args:
        line: Text line without its terminator.
        line_number: 1-based line number, used in error messages.

    Raises:
        RecordParseError: on too few fields or a non-numeric/non-finite value.
    """
    fields = line.split(",")
    if len(fields) < MIN_FIELDS:
        raise RecordParseError(
            line_number, f"expected at least {MIN_FIELDS} fields, got {len(fields)}"
        )

    for col in (TIV2011_COL, TIV2012_COL):
        if not DECIMAL_RE.fullmatch(fields[col]):
            raise RecordParseError(line_number, f"not a decimal number: {fields[col]!r}")

    tiv2011 = float(fields[TIV2011_COL])
    tiv2012 = float(fields[TIV2012_COL])

    try:
        return InsuranceRecord(tiv2011=tiv2011, tiv2012=tiv2012, county=fields[COUNTY_COL])
    except ValidationError as e:
        raise RecordParseError(line_number, "insured values must be finite numbers") from e


def parse_records(lines: Iterable[str]) -> list[InsuranceRecord]:
    """Parse CSV text lines into records, skipping the header line.

    Args:
        lines: Iterable of text lines (a text stream works). The first line
            is treated as a header and discarded.

    Returns:
        Ordered list of records, one per data line.
    """
    records: list[InsuranceRecord] = []
    for line_number, line in enumerate(lines, start=1):
        if line_number == 1:
            continue
        records.append(parse_line(line.rstrip("\r\n"), line_number))
    return records


def load_records(archive_path: Path, entry_name: str) -> list[InsuranceRecord]:
    """Read and parse the CSV entry of the zipped dataset.

    Raises:
        LoadError: any archive or parse failure (see `fl_insurance.errors`).
    """
    with open_archive_entry(archive_path, entry_name) as stream:
        try:
            records = parse_records(stream)
        except READ_ERRORS + (UnicodeDecodeError,) as e:
            raise ArchiveReadError(f"Cannot read {entry_name} from {archive_path}: {e}") from e

    log.info("Loaded %d records from %s", len(records), archive_path)
    return records
