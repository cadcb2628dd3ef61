"""Root logger configuration for voscope hosts.

Library modules only create ``logging.getLogger(__name__)`` loggers and pass
structured fields through ``extra`` (``event``, ``level``, ``building_id``...).
A host application calls :func:`setup_logging` once at startup to route those
records to a JSON-lines file and a readable console stream.
"""

from __future__ import annotations

import json
import logging
from logging import Handler
from pathlib import Path
from typing import Any, Dict, Optional

from .env import is_dev_mode


PROJECT_ROOT = Path(__file__).resolve().parents[3]
LOG_DIR = PROJECT_ROOT / "data" / "logs"
DEFAULT_LOG_FILE = LOG_DIR / "voscope.log"

CONSOLE_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

# Attributes every LogRecord carries; anything else arrived through ``extra``.
_RECORD_ATTRS = frozenset(
    logging.LogRecord("voscope", logging.INFO, __file__, 0, "", None, None).__dict__
) | {"message", "asctime"}

_CONFIGURED = False


def _json_safe(value: Any) -> Any:
    if isinstance(value, (str, int, float, bool, type(None))):
        return value
    return str(value)


class StructuredFormatter(logging.Formatter):
    """One JSON object per line: timestamp, level, logger, message, extras."""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        payload.update(
            (key, _json_safe(value))
            for key, value in record.__dict__.items()
            if key not in _RECORD_ATTRS and not key.startswith("_")
        )
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)

        return json.dumps(payload)


def _build_handlers(log_file: Path) -> list[Handler]:
    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setFormatter(StructuredFormatter())

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))

    return [file_handler, console_handler]


def setup_logging(level: Optional[int] = None, log_file: Optional[Path] = None) -> Path:
    """Install the file and console handlers on the root logger.

    Runs once per process; later calls return the requested path without
    touching the handlers. ``level`` defaults to DEBUG in dev mode and INFO
    otherwise.
    """

    global _CONFIGURED

    target = log_file or DEFAULT_LOG_FILE
    if _CONFIGURED:
        return target

    target.parent.mkdir(parents=True, exist_ok=True)
    if level is None:
        level = logging.DEBUG if is_dev_mode() else logging.INFO

    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
    for handler in _build_handlers(target):
        root_logger.addHandler(handler)
    root_logger.setLevel(level)

    _CONFIGURED = True
    logging.getLogger(__name__).debug(
        "Logging configured", extra={"event": "logging.configured", "log_file": str(target)}
    )
    return target


def get_log_file_path() -> Path:
    return DEFAULT_LOG_FILE
