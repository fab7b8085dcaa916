from __future__ import annotations
import logging
import os

_DEFAULT_LOG_LEVEL = 'WARNING'
_DEFAULT_MAX_DEPTH = 0


def int_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        raise ValueError(f"{var} must be an integer, got {raw!r}") from None
    if value < 0:
        raise ValueError(f"{var} must not be negative, got {value}")
    return value


def get_log_level() -> int:
    raw = os.environ.get('SEXPREAD_LOG_LEVEL', _DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(raw)
    if not isinstance(level, int):
        raise ValueError(f"SEXPREAD_LOG_LEVEL must be a logging level name, got {raw!r}")
    return level


def get_max_depth() -> int:
    # 0 means the reader does not impose its own nesting limit
    return int_from_env('SEXPREAD_MAX_DEPTH', _DEFAULT_MAX_DEPTH)
