"""Small integer and comparison helpers used by the tree layout."""

from __future__ import annotations

from typing import TypeVar

T = TypeVar("T")


def bsr(n: int) -> int:
    """Return the index of the most significant set bit of ``n``.

    ``bsr(1) == 0``, ``bsr(2) == 1``, ``bsr(3) == 1``. For a node index ``s``
    in an implicit binary tree, ``bsr(s + 1)`` is the depth of that node.
    """
    if n < 1:
        raise ValueError(f"bsr is defined for positive integers only, got {n}")
    return n.bit_length() - 1


def maximum(a: T, b: T) -> T:
    """Return the larger of ``a`` and ``b``, preferring ``b`` on ties."""
    return a if a > b else b