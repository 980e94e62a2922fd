from __future__ import annotations

import re
from typing import Callable, Iterable, TypeVar

T = TypeVar("T")

ALPHA_START_RE = re.compile(r"[A-Za-z]")


def count_items(
    items: Iterable[T],
    predicate: Callable[[T], bool] | None = None,
    weight: Callable[[T], int] | None = None,
) -> int:
    """
    Sum ``weight(item)`` over every item accepted by ``predicate``.

    A missing predicate accepts every item and a missing weight counts each
    accepted item once.
    """
    total = 0
    for item in items:
        if predicate is None or predicate(item):
            total += weight(item) if weight is not None else 1
    return total


def is_word(segment: str) -> bool:
    """Return True when the segment starts with a letter or digit."""
    return bool(segment) and segment[0].isalnum()


def is_alpha_word(segment: str) -> bool:
    """Return True when the segment starts with an ASCII letter."""
    return ALPHA_START_RE.match(segment) is not None
