"""Command-line entry point for the insurance summary pipeline.

The run has no options: it reads the fixed archive from the working
directory, computes the three summaries and writes `count.txt`,
`tiv2012.txt` and `most_valuable.txt` next to it.
"""
from __future__ import annotations

import logging

from fl_insurance.config import Settings, get_settings
from fl_insurance.errors import LoadError, OutputWriteError
from fl_insurance.logging_config import configure_logging

# INGEST
from fl_insurance.ingest.parse_records import load_records

# AGGREGATE
from fl_insurance.aggregate.build_summary import (
    count_counties,
    top_growth_counties,
    total_tiv2012,
)
from fl_insurance.aggregate.write_outputs import (
    write_count,
    write_most_valuable,
    write_tiv2012,
)

log = logging.getLogger(__name__)


def run(settings: Settings) -> int:
    """Load the dataset, compute the summaries and write the output files.

    A load failure is reported once and nothing is written. A failure writing
    one output is reported and the remaining outputs are still attempted.

    Args:
        settings: Input and output locations.

    Returns:
        Process exit status: 1 if the dataset could not be loaded, else 0.
    """
    try:
        records = load_records(settings.data_zip, settings.data_entry)
    except LoadError as e:
        log.error("Error reading data file: %s", e)
        return 1

    # ---- COUNT ----
    try:
        count = count_counties(records)
        write_count(count, settings.count_file)
        log.info("Distinct counties: %d", count)
    except OutputWriteError as e:
        log.error("Error writing to file: %s", e)

    # ---- TIV 2012 ----
    try:
        total = total_tiv2012(records)
        write_tiv2012(total, settings.tiv2012_file)
        log.info("Total insured value 2012: %s", total)
    except OutputWriteError as e:
        log.error("Error writing to file: %s", e)

    # ---- TOP GROWTH ----
    try:
        ranked = top_growth_counties(records, settings.top_n)
        write_most_valuable(ranked, settings.most_valuable_file)
        log.info("Top growth counties written: %d rows", len(ranked))
    except OutputWriteError as e:
        log.error("Error writing to file: %s", e)

    return 0


def main() -> None:
    """CLI entry point: configure logging and run against the working directory."""
    configure_logging()
    raise SystemExit(run(get_settings()))


if __name__ == "__main__":
    main()
