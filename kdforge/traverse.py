"""Stackless depth-first walk over a kd-tree stored in implicit heap layout.

Node ``i`` has children ``2*i + 1`` and ``2*i + 2``; its parent is
``(i + 1) // 2 - 1``. The walk descends first into the child on the query's
side of the splitting plane and visits the far child only when the plane
lies within ``r_max`` (squared) of the query.
"""

from __future__ import annotations

from typing import Any, Callable, Sequence

from .bits import bsr
from .distance import dimension

Process = Callable[[Sequence, int, Sequence, Any, Any, Any, int], None]
SplitDim = Callable[[Sequence, int, int, int], int]


def round_robin_split(points: Sequence, n: int, dim: int, node: int) -> int:
    """Return the split axis of ``node``: its depth modulo ``dim``."""
    return bsr(node + 1) % dim


def _left_child(node: int) -> int:
    return 2 * node + 1


def _right_child(node: int) -> int:
    return 2 * node + 2


def traverse(
    points: Sequence[Sequence],
    n: int,
    query: Sequence,
    out: Any,
    r_min: Any,
    r_max: Any,
    process: Process,
    split_dim: SplitDim = round_robin_split,
) -> None:
    """Walk the first ``n`` nodes of the tree, calling ``process`` on arrival.

    ``process(points, n, query, out, r_min, r_max, node)`` is called once for
    every node the walk enters from its parent.
    """
    if n <= 0:
        return

    dim = dimension(points)
    prev = -1
    curr = 0

    while True:
        parent = (curr + 1) // 2 - 1
        from_parent = prev + 1 <= curr

        if curr >= n:
            prev, curr = curr, parent
            continue

        if from_parent:
            process(points, n, query, out, r_min, r_max, curr)

        s_dim = split_dim(points, n, dim, curr)
        sign_dist = query[s_dim] - points[curr][s_dim]
        close_side = 1 if sign_dist > 0 else 0
        close_child = _left_child(curr) + close_side
        far_child = _right_child(curr) - close_side
        far_in_range = sign_dist * sign_dist <= r_max

        if from_parent:
            nxt = close_child
        elif prev == close_child and far_in_range:
            nxt = far_child
        else:
            nxt = parent

        if nxt == -1:
            return

        prev, curr = curr, nxt