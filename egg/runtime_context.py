from __future__ import annotations
import sys
from contextlib import contextmanager
from typing import Iterator

from egg.config import get_recursion_limit


# NOTE: sys.setrecursionlimit is process-global. Nested or concurrent runs
# only ever raise the limit, and each restores what it found on exit.
@contextmanager
def recursion_limit(limit: int | None = None) -> Iterator[int]:
    """Raise the host recursion limit to `limit` while evaluating a program."""
    wanted = limit if limit is not None else get_recursion_limit()
    previous = sys.getrecursionlimit()
    if wanted > previous:
        sys.setrecursionlimit(wanted)
    try:
        yield max(wanted, previous)
    finally:
        if wanted > previous:
            sys.setrecursionlimit(previous)
