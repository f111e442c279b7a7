"""Logging configuration sourced from environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

_LOG_FORMATS: frozenset[str] = frozenset({"text", "json"})


@dataclass(frozen=True, slots=True)
class LoggingConfig:
    """Logging pipeline configuration."""

    level_name: str = "INFO"
    console_format: str = "text"  # text|json
    file_path: str | None = None
    file_format: str = "json"  # text|json


def _raw(name: str, *, env: Mapping[str, str] | None = None) -> str | None:
    value = os.getenv(name) if env is None else env.get(name)
    return None if value is None else str(value)


def _log_format(name: str, default: str, *, env: Mapping[str, str] | None = None) -> str:
    raw = _raw(name, env=env)
    if raw is None:
        return default
    value = raw.strip().lower()
    return value if value in _LOG_FORMATS else default


def resolve_log_level_name(
    default: str = "INFO", *, env: Mapping[str, str] | None = None
) -> str:
    """Resolve log level with package-prefixed override."""
    value = _raw("RECTOPS_LOG_LEVEL", env=env)
    if value is None:
        value = _raw("LOG_LEVEL", env=env)
    if value is None or not value.strip():
        value = default
    return value.strip().upper()


def load_logging_config(*, env: Mapping[str, str] | None = None) -> LoggingConfig:
    """Load immutable logging configuration from env vars."""
    file_path = (_raw("RECTOPS_LOG_FILE", env=env) or "").strip() or None
    return LoggingConfig(
        level_name=resolve_log_level_name(env=env),
        console_format=_log_format("RECTOPS_LOG_FORMAT", "text", env=env),
        file_path=file_path,
        file_format="json",
    )
