from __future__ import annotations

import math
import random
from typing import Sequence, TypeVar

T = TypeVar("T")


def shuffle_items(items: Sequence[T], rng: random.Random | None = None) -> list[T]:
    """
    Return a shuffled copy of `items` (Fisher-Yates); the input is left untouched.

    Pass a seeded `random.Random` to get reproducible orderings.
    """
    rng = rng or random.Random()
    result = list(items)
    for i in range(len(result) - 1, 0, -1):
        j = rng.randint(0, i)
        result[i], result[j] = result[j], result[i]
    return result


def format_percentage(value: int | float, total: int | float) -> int:
    if total == 0:
        return 0
    # half-up, not banker's rounding
    return int(math.floor(value / total * 100 + 0.5))


def clamp(value: float, lo: float, hi: float) -> float:
    return min(max(value, lo), hi)


_TRUE_FLAGS = {"1", "true", "yes", "on"}
_FALSE_FLAGS = {"0", "false", "no", "off"}


def parse_flag(raw: str) -> bool | None:
    """Read a true/false flag ("true", "0", "yes", ...); None when it is neither."""
    text = raw.strip().lower()
    if text in _TRUE_FLAGS:
        return True
    if text in _FALSE_FLAGS:
        return False
    return None
