"""In-place deduplication and rotation of lists."""

from __future__ import annotations

from collections.abc import MutableSequence


def _reverse(values: MutableSequence[int], start: int, stop: int) -> None:
    values[start:stop] = values[start:stop][::-1]


def remove_duplicates(values: MutableSequence[int]) -> int:
    """Compact a sorted list so its distinct values lead it, in place.

    Returns how many leading elements are distinct; the elements after them
    are left as they were.
    """
    if not values:
        return 0
    write = 0
    for value in values[1:]:
        if value != values[write]:
            write += 1
            values[write] = value
    return write + 1


def rotate_left_one(values: MutableSequence[int]) -> None:
    """Move the first element to the end, in place."""
    values[:] = [*values[1:], *values[:1]]


def rotate_left(values: MutableSequence[int], k: int) -> None:
    """Rotate the list k places to the left in place, using a copy of the head."""
    if not values:
        return
    k %= len(values)
    head = list(values[:k])
    values[:] = [*values[k:], *head]


def rotate_left_reversal(values: MutableSequence[int], k: int) -> None:
    """Rotate the list k places to the left in place by three reversals."""
    n = len(values)
    if not n:
        return
    k %= n
    _reverse(values, 0, k)
    _reverse(values, k, n)
    _reverse(values, 0, n)


def rotate_right(values: MutableSequence[int], k: int) -> None:
    """Rotate the list k places to the right in place, using a copy of the tail."""
    n = len(values)
    if not n:
        return
    k %= n
    tail = list(values[n - k :])
    values[:] = [*tail, *values[: n - k]]


def rotate_right_reversal(values: MutableSequence[int], k: int) -> None:
    """Rotate the list k places to the right in place by three reversals."""
    n = len(values)
    if not n:
        return
    k %= n
    _reverse(values, n - k, n)
    _reverse(values, 0, n - k)
    _reverse(values, 0, n)