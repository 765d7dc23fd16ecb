from __future__ import annotations
import os


_DEFAULT_RECURSION_LIMIT = 10000


def int_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if not raw:
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        return default
    return value if value > 0 else default


def get_recursion_limit() -> int:
    return int_from_env('EGG_RECURSION_LIMIT', _DEFAULT_RECURSION_LIMIT)
