"""Random point coordinates for benchmarks and experiments."""

from __future__ import annotations

import math
import random
from enum import Enum
from typing import List, Optional, Union

Number = Union[int, float]

_default_rng = random.Random()


class Dataset(Enum):
    """Shape of a generated dataset."""

    BASIC = 0
    CLUSTERED = 1


def _round_half_away(value: float) -> int:
    if value >= 0:
        return math.floor(value + 0.5)
    return -math.floor(-value + 0.5)


def _uniform_real(rng: random.Random, lo: float, hi: float) -> float:
    return lo + (hi - lo) * rng.random()


def generate_dataset(
    size: int,
    v_min: Number,
    v_max: Number,
    kind: Dataset = Dataset.BASIC,
    rng: Optional[random.Random] = None,
) -> List[Number]:
    """Return ``size`` values in ``[v_min, v_max]``.

    Values are integers when both bounds are integers, floats otherwise.
    ``BASIC`` draws uniformly; ``CLUSTERED`` draws around about ``sqrt(size)``
    random centres with normal noise and clamps to the range.
    """
    if size < 0:
        raise ValueError(f"size must be non-negative, got {size}")
    if v_min > v_max:
        raise ValueError(f"empty range: v_min {v_min} > v_max {v_max}")
    rng = rng if rng is not None else _default_rng
    integral = isinstance(v_min, int) and isinstance(v_max, int)

    if kind is Dataset.BASIC:
        if integral:
            return [rng.randint(v_min, v_max) for _ in range(size)]
        return [_uniform_real(rng, float(v_min), float(v_max)) for _ in range(size)]

    if kind is not Dataset.CLUSTERED:
        raise ValueError(f"unknown dataset kind: {kind!r}")

    if size == 0:
        return []

    lo, hi = float(v_min), float(v_max)
    num_clusters = max(1, math.isqrt(size))
    centers = sorted(_uniform_real(rng, lo, hi) for _ in range(num_clusters))
    cluster_std = (hi - lo) / (num_clusters * 10.0)

    result: List[Number] = []
    for _ in range(size):
        chosen = rng.randrange(num_clusters)
        value = min(max(centers[chosen] + rng.gauss(0.0, cluster_std), lo), hi)
        result.append(_round_half_away(value) if integral else value)
    return result