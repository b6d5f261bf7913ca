"""Contiguous subarrays and the largest sum among them."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import accumulate


def all_subarrays(values: Sequence[int]) -> list[list[int]]:
    """Return every non-empty contiguous subarray.

    They are ordered by start position, then by end position.
    """
    return [
        list(values[start : end + 1])
        for start in range(len(values))
        for end in range(start, len(values))
    ]


def max_subarray_sum_brute(values: Sequence[int]) -> int:
    """Return the largest sum of a contiguous subarray, trying every start."""
    if not values:
        raise ValueError("max_subarray_sum_brute() of an empty sequence")
    return max(
        max(accumulate(values[start:])) for start in range(len(values))
    )


def max_subarray_sum(values: Sequence[int]) -> int:
    """Return the largest sum of a contiguous subarray in one pass."""
    if not values:
        raise ValueError("max_subarray_sum() of an empty sequence")
    best = values[0]
    running = 0
    for value in values:
        running += value
        best = max(best, running)
        if running < 0:
            running = 0
    return best