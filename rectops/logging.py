"""Logging for the ``rectops`` logger hierarchy.

Only the package logger is configured; the root logger and handlers owned by
the embedding application are left alone.
"""

from __future__ import annotations

import json
import logging
from datetime import UTC, datetime
from pathlib import Path

from rectops.config import LoggingConfig, load_logging_config

PACKAGE_LOGGER_NAME = "rectops"

# Attributes every LogRecord carries; anything else arrived through ``extra``.
_RECORD_ATTRIBUTES: frozenset[str] = frozenset(
    logging.LogRecord("", logging.NOTSET, "", 0, "", (), None).__dict__
) | {"message", "asctime"}


class JsonFormatter(logging.Formatter):
    """One JSON object per record, with ``extra`` values under ``fields``."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, object] = {
            "ts": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        fields = {k: v for k, v in record.__dict__.items() if k not in _RECORD_ATTRIBUTES}
        if fields:
            payload["fields"] = fields
        return json.dumps(payload, ensure_ascii=True, default=str)


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the package hierarchy."""
    if name != PACKAGE_LOGGER_NAME and not name.startswith(f"{PACKAGE_LOGGER_NAME}."):
        name = f"{PACKAGE_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def configure_logging(config: LoggingConfig) -> logging.Logger:
    """Replace the package logger's handlers according to ``config``."""
    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    logger.setLevel(getattr(logging, config.level_name.upper(), logging.INFO))
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(_formatter(config.console_format))
    logger.addHandler(console_handler)

    if config.file_path:
        file_path = Path(config.file_path)
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(file_path, mode="a", encoding="utf-8", delay=True)
        file_handler.setFormatter(_formatter(config.file_format))
        logger.addHandler(file_handler)

    # Records are handled here; do not repeat them through the application's root handlers.
    logger.propagate = False
    return logger


def setup_logging() -> None:
    """Configure from env unless the package logger already has handlers."""
    if logging.getLogger(PACKAGE_LOGGER_NAME).handlers:
        return
    configure_logging(load_logging_config())


def _formatter(kind: str) -> logging.Formatter:
    if kind == "json":
        return JsonFormatter()
    return logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
