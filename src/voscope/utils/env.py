"""Environment helpers for runtime configuration."""

import os
from functools import lru_cache

_TRUTHY = {"1", "true", "yes", "on"}


def _normalized(name: str) -> str:
    return (os.environ.get(name) or "").strip().lower()


@lru_cache
def is_dev_mode() -> bool:
    """Return True when the navigator runs in development mode."""
    value = _normalized("VOSCOPE_ENV") or _normalized("VOSCOPE_DEV_MODE")
    if not value:
        return False
    return value in {"dev", "development"} | _TRUTHY


def is_perf_debug() -> bool:
    """Return True when performance timing is enabled (VOSCOPE_PERF_DEBUG=1)."""
    return _normalized("VOSCOPE_PERF_DEBUG") in _TRUTHY


__all__ = ["is_dev_mode", "is_perf_debug"]
