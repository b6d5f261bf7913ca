"""Binary search and its variants over sorted, rotated and mountain lists."""

from __future__ import annotations

from collections.abc import Sequence


def binary_search(values: Sequence[int], target: int) -> int:
    """Return the index of target in an ascending list, or -1."""
    start, end = 0, len(values) - 1
    while start <= end:
        mid = start + (end - start) // 2
        if values[mid] == target:
            return mid
        if target > values[mid]:
            start = mid + 1
        else:
            end = mid - 1
    return -1


def binary_search_recursive(
    values: Sequence[int], target: int, start: int = 0, end: int | None = None
) -> int:
    """Return the index of target within values[start..end] inclusive, or -1.

    The list must be ascending; end defaults to the last index.
    """
    if end is None:
        end = len(values) - 1
    if start > end:
        return -1
    mid = start + (end - start) // 2
    if values[mid] == target:
        return mid
    if target > values[mid]:
        return binary_search_recursive(values, target, mid + 1, end)
    return binary_search_recursive(values, target, start, mid - 1)


def search_rotated(values: Sequence[int], target: int) -> int:
    """Return the index of target in a rotated ascending list, or -1."""
    start, end = 0, len(values) - 1
    while start <= end:
        mid = start + (end - start) // 2
        if values[mid] == target:
            return mid
        if values[start] <= values[mid]:
            if values[start] <= target <= values[mid]:
                end = mid - 1
            else:
                start = mid + 1
        elif values[mid] <= target <= values[end]:
            start = mid + 1
        else:
            end = mid - 1
    return -1


def _is_peak(values: Sequence[int], index: int) -> bool:
    return values[index - 1] < values[index] > values[index + 1]


def peak_index_linear(values: Sequence[int]) -> int:
    """Return the first index greater than both neighbours, or -1."""
    return next(
        (index for index in range(1, len(values) - 1) if _is_peak(values, index)),
        -1,
    )


def peak_index(values: Sequence[int]) -> int:
    """Return the peak index of a mountain list by binary search, or -1."""
    start, end = 1, len(values) - 2
    while start <= end:
        mid = start + (end - start) // 2
        if _is_peak(values, mid):
            return mid
        if values[mid - 1] < values[mid]:
            start = mid + 1
        else:
            end = mid - 1
    return -1


def single_element(values: Sequence[int]) -> int:
    """Return the one value that appears once in a sorted list of pairs.

    Raises ValueError when the list is empty or no such value is found.
    """
    if not values:
        raise ValueError("single_element() of an empty sequence")
    last = len(values) - 1
    start, end = 0, last
    while start <= end:
        mid = start + (end - start) // 2
        same_left = mid > 0 and values[mid - 1] == values[mid]
        same_right = mid < last and values[mid + 1] == values[mid]
        if not same_left and not same_right:
            return values[mid]
        # Before the single value, pairs start on even indices.
        if (mid % 2 == 0) == same_left:
            end = mid - 1
        else:
            start = mid + 1
    raise ValueError("no element appears exactly once")