"""Runtime settings read from ``FACTORIALS_*`` environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from .errors import ConfigurationError

DEFAULT_CHUNK_SIZE = 16
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class Settings:
    max_workers: int
    chunk_size: int
    log_level: str
    log_json: bool


def env_enabled(name: str, default: bool = True) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.lower() not in {"0", "false", "no", "off"}


def env_positive_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        parsed = int(value)
    except ValueError:
        raise ConfigurationError(name, value, "expected an integer") from None
    if parsed < 1:
        raise ConfigurationError(name, value, "must be >= 1")
    return parsed


def default_max_workers() -> int:
    # Same bound ThreadPoolExecutor picks when given no max_workers.
    return min(32, (os.cpu_count() or 1) + 4)


def load_settings() -> Settings:
    return Settings(
        max_workers=env_positive_int("FACTORIALS_MAX_WORKERS", default_max_workers()),
        chunk_size=env_positive_int("FACTORIALS_CHUNK_SIZE", DEFAULT_CHUNK_SIZE),
        log_level=os.getenv("FACTORIALS_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
        log_json=env_enabled("FACTORIALS_LOG_JSON", default=False),
    )


def resolve_max_workers(max_workers: Optional[int], settings: Optional[Settings] = None) -> int:
    if max_workers is not None:
        return max_workers
    if settings is not None:
        return settings.max_workers
    return env_positive_int("FACTORIALS_MAX_WORKERS", default_max_workers())


def resolve_chunk_size(chunk_size: Optional[int], settings: Optional[Settings] = None) -> int:
    if chunk_size is not None:
        return chunk_size
    if settings is not None:
        return settings.chunk_size
    return env_positive_int("FACTORIALS_CHUNK_SIZE", DEFAULT_CHUNK_SIZE)
