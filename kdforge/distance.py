"""Euclidean distance helpers over coordinate sequences."""

from __future__ import annotations

from itertools import islice
from typing import Sequence


def dist2(x: Sequence, y: Sequence, n: int):
    """Return the squared Euclidean distance over the first ``n`` coordinates."""
    if n < 0:
        raise ValueError(f"dimension must be non-negative, got {n}")
    if len(x) < n or len(y) < n:
        raise ValueError(
            f"points have {len(x)} and {len(y)} coordinates, need at least {n}"
        )
    total = 0
    for a, b in islice(zip(x, y), n):
        d = a - b
        total += d * d
    return total


def dimension(points: Sequence[Sequence]) -> int:
    """Return the number of coordinates of the points in ``points``."""
    if not points:
        raise ValueError("cannot determine the dimension of an empty point set")
    return len(points[0])