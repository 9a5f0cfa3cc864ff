"""Sorting of 16-bit unsigned values."""

from __future__ import annotations

from collections.abc import MutableSequence

_UINT16_MAX = 0xFFFF


def terrible_sort(values: MutableSequence[int]) -> MutableSequence[int]:
    """Sort ``values`` in place in ascending order and return the same sequence.

    Every value must fit in an unsigned 16-bit integer. The sequence is only
    replaced once the sorted copy has been verified to be in order.
    """
    if values is None:
        raise ValueError("values must not be None")
    if len(values) == 0:
        raise ValueError("values must not be empty")
    if any(not 0 <= value <= _UINT16_MAX for value in values):
        raise ValueError("every value must be an unsigned 16-bit integer")

    ordered = sorted(values)
    if any(left > right for left, right in zip(ordered, ordered[1:])):
        raise RuntimeError("sorted copy is out of order")
    values[:] = ordered
    return values