"""Access to the CSV entry stored inside the zipped dataset.

`open_archive_entry` is a context manager: the decoded text stream and the
underlying zip handle are both closed when the block exits, whether it
completes or raises.
"""

from __future__ import annotations

import io
import logging
import zipfile
import zlib
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from fl_insurance.errors import ArchiveNotFoundError, ArchiveReadError, EntryNotFoundError

log = logging.getLogger(__name__)

# failures while decompressing member data
READ_ERRORS = (zipfile.BadZipFile, zlib.error, EOFError, OSError)


def find_entry(archive: zipfile.ZipFile, entry_name: str) -> zipfile.ZipInfo:
    """Return the first non-directory member named exactly `entry_name`.

    Raises:
        EntryNotFoundError: if the archive has no such file member.
    """
    for info in archive.infolist():
        if info.filename == entry_name and not info.is_dir():
            return info
    raise EntryNotFoundError(f"Data file {entry_name!r} not found in the zip archive")


@contextmanager
def open_archive_entry(archive_path: Path, entry_name: str) -> Iterator[io.TextIOWrapper]:
    """Yield a UTF-8 text stream over `entry_name` inside `archive_path`.

    Args:
        archive_path: Path to the zip archive.
        entry_name: Exact member name to read.

    Raises:
        ArchiveNotFoundError: if `archive_path` does not exist.
        ArchiveReadError: if the archive is not a readable zip file, or the
            entry is encrypted or uses an unsupported compression method.
        EntryNotFoundError: if no file member matches `entry_name`.
    """
    try:
        archive = zipfile.ZipFile(archive_path)
    except FileNotFoundError as e:
        raise ArchiveNotFoundError(f"Archive {archive_path} does not exist") from e
    except (zipfile.BadZipFile, OSError) as e:
        raise ArchiveReadError(f"Cannot open archive {archive_path}: {e}") from e

    with archive:
        info = find_entry(archive, entry_name)
        log.info("Reading %s from %s (%d bytes)", entry_name, archive_path, info.file_size)
        try:
            raw = archive.open(info)
        except READ_ERRORS + (NotImplementedError, RuntimeError) as e:
            raise ArchiveReadError(f"Cannot read {entry_name} from {archive_path}: {e}") from e
        with io.TextIOWrapper(raw, encoding="utf-8") as stream:
            yield stream
