from __future__ import annotations
import os

# Width of the language's native integer. Literals and + wrap to this.
INT_BITS = 32

_DEFAULT_MAX_DEPTH = 128
_DEFAULT_LOG_LEVEL = "WARNING"


def int_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if not raw:
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        raise ValueError(f"{var} must be an integer, got {raw!r}") from None
    if value < 1:
        raise ValueError(f"{var} must be positive, got {value}")
    return value


def get_max_depth() -> int:
    """Nesting limit shared by the reader and the evaluator."""
    return int_from_env("CATA_MAX_DEPTH", _DEFAULT_MAX_DEPTH)


def get_log_level() -> str:
    return os.environ.get("CATA_LOG_LEVEL", _DEFAULT_LOG_LEVEL).strip().upper()
