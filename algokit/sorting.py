"""Elementary sorting and array rearrangement routines."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any


def insertion_sort(values: Iterable[Any]) -> list[Any]:
    """Return a new list with ``values`` sorted by insertion sort."""
    result: list[Any] = []
    for item in values:
        position = len(result)
        while position > 0 and result[position - 1] > item:
            position -= 1
        result.insert(position, item)
    return result


def _merge(left: list[Any], right: list[Any]) -> list[Any]:
    merged: list[Any] = []
    left_iter, right_iter = iter(left), iter(right)
    left_item = next(left_iter, None)
    right_item = next(right_iter, None)
    left_done, right_done = not left, not right
    while not left_done and not right_done:
        if left_item <= right_item:
            merged.append(left_item)
            try:
                left_item = next(left_iter)
            except StopIteration:
                left_done = True
        else:
            merged.append(right_item)
            try:
                right_item = next(right_iter)
            except StopIteration:
                right_done = True
    if not left_done:
        merged.append(left_item)
        merged.extend(left_iter)
    if not right_done:
        merged.append(right_item)
        merged.extend(right_iter)
    return merged


def merge_sort(values: Iterable[Any]) -> list[Any]:
    """Return a new list with ``values`` sorted by a stable top-down merge sort."""
    items = list(values)
    if len(items) <= 1:
        return items
    middle = (len(items) - 1) // 2 + 1
    return _merge(merge_sort(items[:middle]), merge_sort(items[middle:]))


def selection_sort(values: Iterable[Any]) -> list[Any]:
    """Return a new list with ``values`` sorted by selection sort."""
    items = list(values)
    for start in range(len(items)):
        smallest = min(range(start, len(items)), key=items.__getitem__)
        items[start], items[smallest] = items[smallest], items[start]
    return items


def move_negatives_left(values: Iterable[Any]) -> list[Any]:
    """Return a new list with every negative value moved before the others.

    Negative values keep their relative order.
    """
    items = list(values)
    boundary = 0
    for index, item in enumerate(items):
        if item < 0:
            if index != boundary:
                items[index], items[boundary] = items[boundary], items[index]
            boundary += 1
    return items


def reverse_range(values: Sequence[Any], start: int, end: int) -> list[Any]:
    """Return a copy of ``values`` with the inclusive slice ``start..end`` reversed."""
    items = list(values)
    if end <= start:
        return items
    if start < 0 or end >= len(items):
        raise IndexError(f"range {start}..{end} outside sequence of length {len(items)}")
    items[start : end + 1] = items[start : end + 1][::-1]
    return items