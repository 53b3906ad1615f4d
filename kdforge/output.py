"""Result record of a nearest-neighbour search."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Union

Number = Union[int, float]


@dataclass
class Output:
    """Index of a found point and its squared distance to the query.

    A fresh record holds index 0 and the largest possible distance, so any
    real candidate compares closer.
    """

    idx: int = 0
    dst: Number = field(default=math.inf)

    def __add__(self, other: "Output") -> "Output":
        if not isinstance(other, Output):
            return NotImplemented
        return Output(self.idx + other.idx, self.dst + other.dst)

    def __sub__(self, other: "Output") -> "Output":
        if not isinstance(other, Output):
            return NotImplemented
        return Output(self.idx - other.idx, self.dst - other.dst)

    def __rmul__(self, scalar: Number) -> "Output":
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Output(scalar * self.idx, scalar * self.dst)