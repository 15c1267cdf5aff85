"""Logging helpers for paymentsheet tools."""

from __future__ import annotations

import logging
import os
from pathlib import Path


class ResolutionFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:  # type: ignore[override]
        if record.levelno >= logging.WARNING:
            return True
        return record.name.startswith(("paymentsheet.metadata", "paymentsheet.forms"))


def configure_logging(level: int = logging.INFO, log_path: str | None = None) -> None:
    """Configure default logging if no handlers are present."""
    root = logging.getLogger()
    if root.handlers:
        return
    handlers: list[logging.Handler] = [logging.StreamHandler()]

    resolved_path = log_path or (os.getenv("PAYMENTSHEET_LOG_PATH") or "").strip() or None
    if resolved_path:
        path = Path(resolved_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(path, encoding="utf-8")
        file_handler.addFilter(ResolutionFilter())
        handlers.append(file_handler)

    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=handlers,
    )
