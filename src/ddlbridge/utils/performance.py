"""
Slow-query threshold resolution.
"""

from __future__ import annotations

import os

SLOW_QUERY_ENV_VAR = "DDLBRIDGE_SLOW_QUERY_MS"


def resolve_slow_query_ms(*, default: int, override: int | None = None) -> int:
    """
    Pick the slow-query threshold in milliseconds.

    An explicit ``override`` wins, then ``DDLBRIDGE_SLOW_QUERY_MS``, then ``default``.
    Unparseable or negative environment values fall back to ``default``.
    """

    if override is not None:
        return override
    raw = os.getenv(SLOW_QUERY_ENV_VAR)
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if value >= 0 else default
