"""Exception hierarchy for the insurance summary pipeline.

Load errors abort the run before any output is written. Write errors are
reported per output file and never stop the remaining writers.
"""

from __future__ import annotations

from pathlib import Path


class FloridaInsuranceError(Exception):
    """Base exception for all pipeline failures."""


class LoadError(FloridaInsuranceError):
    """Raised when the input dataset cannot be loaded."""


class ArchiveNotFoundError(LoadError):
    """Raised when the input archive does not exist."""


class ArchiveReadError(LoadError):
    """Raised when the input archive cannot be opened or read."""


class EntryNotFoundError(LoadError):
    """Raised when the archive has no file entry with the expected name."""


class RecordParseError(LoadError):
    """Raised for a malformed CSV data line."""

    def __init__(self, line_number: int, reason: str) -> None:
        self.line_number = line_number
        super().__init__(f"Malformed record on line {line_number}: {reason}")


class OutputWriteError(FloridaInsuranceError):
    """Raised when a single output file cannot be written."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"Failed to write {path}: {reason}")
