from __future__ import annotations

from typing import Callable


def create_increment() -> Callable[[], int]:
    """Return a function yielding 1, 2, 3, ... on successive calls.

    The running value lives only in this closure, so separately created
    incrementers never see each other's counts.
    """
    value = 0

    def increment() -> int:
        nonlocal value
        value += 1
        return value

    return increment
