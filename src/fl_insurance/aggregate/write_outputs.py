"""Writers for the summary output files.

Each writer owns its file handle and wraps I/O failures in
`OutputWriteError` so the caller can report them per file and carry on with
the other outputs.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence

from fl_insurance.aggregate.build_summary import format_growth
from fl_insurance.errors import OutputWriteError
from fl_insurance.models import CountyGrowth

log = logging.getLogger(__name__)

MOST_VALUABLE_HEADER = "country,value"


def _write_text(path: Path, text: str) -> None:
    """Write `text` to `path` as UTF-8, raising `OutputWriteError` on failure."""
    try:
        with open(path, "w", encoding="utf-8") as f:
            f.write(text)
    except OSError as e:
        raise OutputWriteError(path, e.strerror or str(e)) from e
    log.info("Wrote %s", path)


def write_count(count: int, path: Path) -> None:
    """Write the distinct county count as a single line."""
    _write_text(path, str(count))


def write_tiv2012(total: float, path: Path) -> None:
    """Write the 2012 total insured value using the default float format."""
    _write_text(path, str(total))


def render_most_valuable(rows: Sequence[CountyGrowth]) -> str:
    """Return the `most_valuable.txt` body: header plus one `county,growth` line per row."""
    lines = [MOST_VALUABLE_HEADER]
    lines.extend(f"{row.county},{format_growth(row.growth)}" for row in rows)
    return "".join(f"{line}\n" for line in lines)


def write_most_valuable(rows: Sequence[CountyGrowth], path: Path) -> None:
    """Write the top growth counties table."""
    _write_text(path, render_most_valuable(rows))
