"""
Slow-query threshold resolution.
"""

from __future__ import annotations

import os

SLOW_QUERY_ENV = "FLUENTSQL_SLOW_QUERY_MS"


def resolve_slow_query_ms(*, default: int = 100, override: int | None = None) -> int:
    """
    Pick the slow-query threshold: explicit override, then the
    ``FLUENTSQL_SLOW_QUERY_MS`` environment variable, then ``default``.
    """
    if override is not None:
        return _validated(override)
    raw = os.getenv(SLOW_QUERY_ENV)
    if raw is None or not raw.strip():
        return default
    try:
        return _validated(int(raw))
    except ValueError as exc:
        raise ValueError(f"{SLOW_QUERY_ENV} must be a non-negative integer, got {raw!r}") from exc


def _validated(value: int) -> int:
    if value < 0:
        raise ValueError(f"Slow query threshold must be non-negative, got {value}")
    return value
