"""Classic list problems: pair sums, majority, stock profit, water and order."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import combinations, groupby, pairwise


def pair_sum_brute(nums: Sequence[int], target: int) -> tuple[int, int] | None:
    """Return the first index pair i < j with nums[i] + nums[j] == target, or None."""
    return next(
        (
            (i, j)
            for i, j in combinations(range(len(nums)), 2)
            if nums[i] + nums[j] == target
        ),
        None,
    )


def pair_sum(nums: Sequence[int], target: int) -> tuple[int, int] | None:
    """Find an index pair summing to target in an ascending list, or None.

    Two pointers close in from both ends.
    """
    i, j = 0, len(nums) - 1
    while i < j:
        total = nums[i] + nums[j]
        if total > target:
            j -= 1
        elif total < target:
            i += 1
        else:
            return i, j
    return None


def majority_brute(nums: Sequence[int]) -> int:
    """Return the value occurring more than len/2 times, counting each; -1 if none."""
    half = len(nums) // 2
    return next((value for value in nums if nums.count(value) > half), -1)


def majority_sorted(nums: Sequence[int]) -> int:
    """Return the majority value by sorting and counting runs; -1 if none."""
    half = len(nums) // 2
    for value, run in groupby(sorted(nums)):
        if sum(1 for _ in run) > half:
            return value
    return -1


def majority_moore(nums: Sequence[int]) -> int:
    """Return the Boyer-Moore voting candidate.

    It is the majority value whenever one exists; 0 for an empty list.
    """
    candidate = 0
    votes = 0
    for value in nums:
        if votes == 0:
            candidate, votes = value, 1
        elif value == candidate:
            votes += 1
        else:
            votes -= 1
    return candidate


def max_profit(prices: Sequence[int]) -> int:
    """Return the best profit from one buy followed by one later sale; 0 if none."""
    items = iter(prices)
    lowest = next(items, None)
    if lowest is None:
        return 0
    best = 0
    for price in items:
        best = max(best, price - lowest)
        lowest = min(lowest, price)
    return best


def max_water_brute(heights: Sequence[int]) -> int:
    """Return the largest area between two lines, trying every pair."""
    return max(
        (
            min(left, right) * (j - i)
            for (i, left), (j, right) in combinations(enumerate(heights), 2)
        ),
        default=0,
    )


def max_water(heights: Sequence[int]) -> int:
    """Return the largest area between two lines with two closing pointers."""
    left, right = 0, len(heights) - 1
    best = 0
    while left < right:
        best = max(best, min(heights[left], heights[right]) * (right - left))
        if heights[left] < heights[right]:
            left += 1
        else:
            right -= 1
    return best


def second_largest(values: Sequence[int]) -> int | None:
    """Return the largest value below the maximum, or None if all are equal."""
    if not values:
        raise ValueError("second_largest() of an empty sequence")
    top = max(values)
    return max((value for value in values if value < top), default=None)


def second_smallest(values: Sequence[int]) -> int | None:
    """Return the smallest value above the minimum, or None if all are equal."""
    if not values:
        raise ValueError("second_smallest() of an empty sequence")
    bottom = min(values)
    return min((value for value in values if value > bottom), default=None)


def is_sorted(values: Sequence[int]) -> bool:
    """Tell whether the list is in non-decreasing order."""
    return all(a <= b for a, b in pairwise(values))