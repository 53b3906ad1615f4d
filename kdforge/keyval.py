"""Paired key/point view used while building the tree level by level.

A :class:`KeyVal` ties a sequence of integer keys (the subtree tag of each
point) to the sequence of points. Comparing two positions orders by key
first and then by the point coordinate on the current split axis. Swapping
two positions moves the key and the point together.
"""

from __future__ import annotations

from typing import Any, MutableSequence, Sequence, Tuple


def default_less(seq: Sequence, i: int, j: int) -> bool:
    """Return whether ``seq[i]`` orders before ``seq[j]``."""
    return seq[i] < seq[j]


def default_swap(seq: MutableSequence, i: int, j: int) -> None:
    """Exchange ``seq[i]`` and ``seq[j]`` in place."""
    seq[i], seq[j] = seq[j], seq[i]


def default_swap_if(do_swap: bool, seq: MutableSequence, i: int, j: int) -> None:
    """Exchange ``seq[i]`` and ``seq[j]`` in place when ``do_swap`` is true."""
    if do_swap:
        seq[i], seq[j] = seq[j], seq[i]


class KeyVal:
    """A view over parallel key and point sequences sorted on one axis.

    Both sequences are modified in place by :meth:`swap`, :meth:`swap_if`
    and :meth:`sort`.
    """

    def __init__(
        self,
        keys: MutableSequence[int],
        values: MutableSequence[Sequence[Any]],
        axis: int,
    ) -> None:
        if len(keys) != len(values):
            raise ValueError(
                f"keys and values differ in length: {len(keys)} != {len(values)}"
            )
        if axis < 0:
            raise ValueError(f"axis must be non-negative, got {axis}")
        self.keys = keys
        self.values = values
        self.axis = axis

    def __len__(self) -> int:
        return len(self.keys)

    def __getitem__(self, index: int) -> Tuple[int, Sequence[Any]]:
        return self.keys[index], self.values[index]

    def _sort_key(self, index: int) -> Tuple[Any, Any]:
        return self.keys[index], self.values[index][self.axis]

    def less(self, i: int, j: int) -> bool:
        """Order by key, then by the coordinate on the split axis."""
        key_i, key_j = self.keys[i], self.keys[j]
        if key_i < key_j:
            return True
        if key_i == key_j:
            return self.values[i][self.axis] < self.values[j][self.axis]
        return False

    def swap(self, i: int, j: int) -> None:
        """Exchange the key and the point at positions ``i`` and ``j``."""
        self.keys[i], self.keys[j] = self.keys[j], self.keys[i]
        self.values[i], self.values[j] = self.values[j], self.values[i]

    def swap_if(self, do_swap: bool, i: int, j: int) -> None:
        """Exchange positions ``i`` and ``j`` when ``do_swap`` is true."""
        if do_swap:
            self.swap(i, j)

    def sort(self) -> None:
        """Reorder both sequences so that they are ascending under :meth:`less`."""
        order = sorted(range(len(self)), key=self._sort_key)
        keys = [self.keys[i] for i in order]
        values = [self.values[i] for i in order]
        self.keys[:] = keys
        self.values[:] = values