from __future__ import annotations

import logging
from pathlib import Path

import pytest

from paymentsheet.logging_utils import ResolutionFilter, configure_logging


def _record(name: str, level: int) -> logging.LogRecord:
    return logging.LogRecord(name, level, __file__, 1, "message", None, None)


@pytest.mark.parametrize(
    ("name", "level", "expected"),
    [
        ("paymentsheet.metadata.metadata", logging.DEBUG, True),
        ("paymentsheet.forms.assembly", logging.DEBUG, True),
        ("paymentsheet.presentation.sheet", logging.DEBUG, False),
        ("paymentsheet.presentation.sheet", logging.WARNING, True),
        ("urllib3", logging.INFO, False),
    ],
)
def test_resolution_filter(name, level, expected) -> None:
    assert ResolutionFilter().filter(_record(name, level)) is expected


def test_configure_logging_adds_file_handler(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])
    monkeypatch.setattr(root, "level", root.level)
    log_path = tmp_path / "logs" / "paymentsheet.log"
    monkeypatch.setenv("PAYMENTSHEET_LOG_PATH", str(log_path))

    configure_logging(level=logging.DEBUG)
    file_handlers = [handler for handler in root.handlers if isinstance(handler, logging.FileHandler)]
    try:
        assert len(file_handlers) == 1
        assert log_path.parent.is_dir()
        configure_logging(level=logging.DEBUG)
        assert len(root.handlers) == 2
    finally:
        for handler in file_handlers:
            handler.close()
