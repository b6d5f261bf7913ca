"""Basic operations over lists of integers."""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Iterable, MutableSequence, Sequence
from functools import reduce
from operator import xor


def double_in_place(values: MutableSequence[int]) -> None:
    """Double every element of the list, changing it in place."""
    values[:] = [2 * value for value in values]


def largest(values: Iterable[int]) -> int:
    """Return the largest element; raise ValueError when there is none."""
    return max(values)


def smallest(values: Iterable[int]) -> int:
    """Return the smallest element; raise ValueError when there is none."""
    return min(values)


def min_max(values: Sequence[int]) -> tuple[int, int]:
    """Return the smallest and the largest element as a pair."""
    if not values:
        raise ValueError("min_max() of an empty sequence")
    return min(values), max(values)


def min_max_positions(values: Sequence[int]) -> tuple[tuple[int, int], tuple[int, int]]:
    """Return ``(smallest, index)`` and ``(largest, index)``.

    When a value occurs more than once, the index is that of its last
    occurrence.
    """
    if not values:
        raise ValueError("min_max_positions() of an empty sequence")
    low_index, low = min(enumerate(values), key=lambda item: (item[1], -item[0]))
    high_index, high = max(enumerate(values), key=lambda item: (item[1], item[0]))
    return (low, low_index), (high, high_index)


def unique_elements(values: Sequence[int]) -> list[int]:
    """Return the elements that occur exactly once, in their original order."""
    counts = Counter(values)
    return [value for value in values if counts[value] == 1]


def intersection(first: Iterable[int], second: Iterable[int]) -> list[int]:
    """Return the elements of ``first`` that also occur in ``second``, in order."""
    present = set(second)
    return [value for value in first if value in present]


def linear_search(values: Iterable[int], target: int) -> int:
    """Return the index of the first element equal to target, or -1."""
    return next((index for index, value in enumerate(values) if value == target), -1)


def reverse_in_place(values: MutableSequence[int]) -> None:
    """Reverse the list in place."""
    values.reverse()


def sum_and_product(values: Iterable[int]) -> tuple[int, int]:
    """Return the sum and the product of the elements."""
    items = list(values)
    return sum(items), math.prod(items)


def swap_min_max(values: MutableSequence[int]) -> None:
    """Swap the first smallest and the first largest element in place."""
    if not values:
        raise ValueError("swap_min_max() of an empty sequence")
    low = values.index(min(values))
    high = values.index(max(values))
    values[low], values[high] = values[high], values[low]


def single_number(values: Iterable[int]) -> int:
    """Return the element that appears once when every other appears twice."""
    return reduce(xor, values, 0)