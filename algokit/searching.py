"""Searching and scanning routines over sequences and matrices."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence
from typing import Any


def binary_search(values: Sequence[Any], target: Any, low: int, high: int) -> int | None:
    """Return an index of ``target`` in the sorted slice ``low..high`` (inclusive), or None."""
    while low <= high:
        mid = low + (high - low) // 2
        if values[mid] == target:
            return mid
        if values[mid] > target:
            high = mid - 1
        else:
            low = mid + 1
    return None


def exponential_search(values: Sequence[Any], target: Any) -> int | None:
    """Return an index of ``target`` in sorted ``values`` by exponential search, or None."""
    if not values:
        return None
    if values[0] == target:
        return 0
    count = len(values)
    bound = 1
    while bound < count and values[bound] <= target:
        bound *= 2
    return binary_search(values, target, bound // 2, min(bound, count - 1))


def search_sorted_matrix(
    matrix: Sequence[Sequence[Any]], target: Any
) -> tuple[int, int] | None:
    """Locate ``target`` in a row- and column-sorted matrix; return (row, col) or None."""
    if not matrix or not matrix[0]:
        return None
    rows, cols = len(matrix), len(matrix[0])
    if target < matrix[0][0] or target > matrix[rows - 1][cols - 1]:
        return None
    row, col = 0, cols - 1
    while row < rows and col >= 0:
        current = matrix[row][col]
        if current == target:
            return row, col
        if current > target:
            col -= 1
        else:
            row += 1
    return None


def min_max(values: Sequence[Any]) -> tuple[Any, Any]:
    """Return the smallest and largest elements of ``values``."""
    iterator = iter(values)
    try:
        first = next(iterator)
    except StopIteration:
        raise ValueError("min_max() of an empty sequence") from None
    smallest = largest = first
    for item in iterator:
        if item > largest:
            largest = item
        elif item < smallest:
            smallest = item
    return smallest, largest


def sliding_window_max(values: Sequence[Any], k: int) -> list[Any]:
    """Return the maximum of every contiguous window of length ``k``."""
    if k <= 0:
        raise ValueError("window size must be positive")
    if k > len(values):
        raise ValueError("window size exceeds sequence length")
    window: deque[int] = deque()
    maxima: list[Any] = []
    for index, item in enumerate(values):
        while window and window[0] <= index - k:
            window.popleft()
        while window and item >= values[window[-1]]:
            window.pop()
        window.append(index)
        if index >= k - 1:
            maxima.append(values[window[0]])
    return maxima


def count_triplets_below(values: Sequence[int], total: int) -> int:
    """Count index triplets i<j<k whose values sum to less than ``total``."""
    items = sorted(values)
    count = 0
    for first in range(len(items) - 2):
        low, high = first + 1, len(items) - 1
        while low < high:
            if items[first] + items[low] + items[high] < total:
                count += high - low
                low += 1
            else:
                high -= 1
    return count


def longest_increasing_subsequence(values: Sequence[Any]) -> int:
    """Return the length of the longest strictly increasing subsequence."""
    lengths: list[int] = []
    for index, item in enumerate(values):
        best = 1
        for earlier, length in zip(values[:index], lengths):
            if item > earlier and length + 1 > best:
                best = length + 1
        lengths.append(best)
    return max(lengths, default=0)