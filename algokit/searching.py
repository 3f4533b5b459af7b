"""Searching problems: closest pair across two lists and digit-by-digit square roots."""

from __future__ import annotations

import math
from bisect import bisect_left
from collections.abc import Iterable, Sequence


def min_pair(a1: Iterable[int], a2: Sequence[int]) -> tuple[int, int]:
    """Return the pair (x, y), x from a1 and y from a2, with the smallest |x - y|.

    For each x the nearest values of a2 on either side are examined,
    the smaller neighbour before the larger one. On ties the first pair
    found is kept.
    """
    ordered = sorted(a2)
    if not ordered:
        raise ValueError("second sequence must not be empty")

    best: tuple[int, int] | None = None
    best_diff: int | None = None
    for x in a1:
        index = bisect_left(ordered, x)
        neighbours = ordered[max(index - 1, 0) : index + 1]
        for y in neighbours:
            diff = abs(x - y)
            if best_diff is None or diff < best_diff:
                best_diff = diff
                best = (x, y)

    if best is None:
        raise ValueError("first sequence must not be empty")
    return best


def square_root(n: int, places: int) -> float:
    """Square root of n, truncated to the given number of decimal places.

    The integer part is found exactly; each decimal place is then found
    by stepping up until the square exceeds n and stepping back once.
    Perfect squares return their exact root.
    """
    if n < 0:
        raise ValueError("cannot take the square root of a negative number")
    if places < 0:
        raise ValueError("places must be non-negative")

    root = math.isqrt(n)
    if root * root == n:
        return float(root)

    answer = float(root)
    increment = 0.1
    for _ in range(places):
        while answer * answer <= n:
            answer += increment
        answer -= increment
        increment /= 10.0
    return answer