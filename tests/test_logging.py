from __future__ import annotations

import logging
from pathlib import Path

from fl_insurance.logging_config import configure_logging


def test_configure_logging_adds_stream_handler() -> None:
    # Ensure configuring logging doesn't raise and attaches a StreamHandler
    configure_logging(None)
    root = logging.getLogger()
    assert any(isinstance(h, logging.StreamHandler) for h in root.handlers)


def test_configure_logging_writes_log_file(tmp_path: Path) -> None:
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    # basicConfig only installs handlers on an unconfigured root logger
    root.handlers.clear()

    log_path = tmp_path / "logs" / "run.log"
    configure_logging(log_path)
    try:
        logging.getLogger("fl_insurance.test").info("Loaded %d records", 3)
        file_handlers = [h for h in root.handlers if isinstance(h, logging.FileHandler)]
        assert len(file_handlers) == 1
        file_handlers[0].flush()
        assert log_path.read_text(encoding="utf-8").rstrip().endswith(
            "| INFO | fl_insurance.test | Loaded 3 records"
        )
    finally:
        for h in root.handlers:
            h.close()
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)
