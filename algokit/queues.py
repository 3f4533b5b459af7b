"""Deque and stack problems: sliding-window maximum and path simplification."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence


def max_subarray_k(values: Sequence[int], k: int) -> list[int]:
    """Return the maximum of every window of k consecutive values.

    A deque of indices keeps candidates in decreasing value order, so the
    whole pass is linear.
    """
    if k <= 0 or k > len(values):
        raise ValueError(f"window size {k} invalid for {len(values)} values")

    window: deque[int] = deque()
    maxima: list[int] = []
    for index, value in enumerate(values):
        while window and window[0] <= index - k:
            window.popleft()
        while window and value >= values[window[-1]]:
            window.pop()
        window.append(index)
        if index >= k - 1:
            maxima.append(values[window[0]])
    return maxima


def simplify_path(path: str) -> str:
    """Normalise a slash-separated path.

    Empty and "." components are dropped and ".." removes the previous
    component. In an absolute path ".." at the root is ignored; in a
    relative path leading ".." components are kept.
    """
    absolute = path.startswith("/")
    parts: list[str] = []
    for token in path.split("/"):
        if token in ("", "."):
            continue
        if token == "..":
            if parts and parts[-1] != "..":
                parts.pop()
            elif not absolute:
                parts.append("..")
        else:
            parts.append(token)

    joined = "/".join(parts)
    return "/" + joined if absolute else joined