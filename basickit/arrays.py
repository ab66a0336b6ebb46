"""Searching and ordering helpers for integer and string sequences."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any, TypeVar

T = TypeVar("T")

_END = object()


def _selection_sorted(items: Iterable[T]) -> list[T]:
    """Return a new ascending list, moving the largest remaining item to the end each pass."""
    result = list(items)
    for end in range(len(result) - 1, 0, -1):
        largest = max(range(end + 1), key=result.__getitem__)
        result[end], result[largest] = result[largest], result[end]
    return result


def selection_sort(values: Iterable[int]) -> list[int]:
    """Return the values in ascending order, leaving the input untouched."""
    return _selection_sorted(values)


def unique_sorted(values: Iterable[Any]) -> list[Any]:
    """Drop consecutive repeats from a sorted sequence."""
    result: list[Any] = []
    for value in values:
        if not result or result[-1] != value:
            result.append(value)
    return result


def common_elements(first: Iterable[int], second: Iterable[int]) -> list[int]:
    """Return the elements shared by two ascending sequences, in ascending order."""
    left, right = iter(first), iter(second)
    a, b = next(left, _END), next(right, _END)
    result = []
    while a is not _END and b is not _END:
        if a < b:
            a = next(left, _END)
        elif a > b:
            b = next(right, _END)
        else:
            result.append(a)
            a, b = next(left, _END), next(right, _END)
    return result


def common_elements_of_three(
    first: Iterable[int], second: Iterable[int], third: Iterable[int]
) -> list[int]:
    """Return the elements shared by three ascending sequences."""
    return common_elements(third, common_elements(first, second))


def _distinct_sorted(values: Iterable[int]) -> list[int]:
    return unique_sorted(selection_sort(values))


def closest_pair(values: Iterable[int]) -> tuple[int, int]:
    """Return the two distinct values whose difference is smallest, smaller first."""
    distinct = _distinct_sorted(values)
    if len(distinct) < 2:
        raise ValueError("need at least two distinct values")
    return min(zip(distinct, distinct[1:]), key=lambda pair: pair[1] - pair[0])


def max_and_second(values: Iterable[int]) -> tuple[int, int]:
    """Return the largest value and the largest value below it."""
    distinct = _distinct_sorted(values)
    if len(distinct) < 2:
        raise ValueError("need at least two distinct values")
    return distinct[-1], distinct[-2]


def majority_element(values: Sequence[int]) -> int | None:
    """Return the value that makes up more than half of ``values``, or None."""
    threshold = len(values) // 2
    counts: dict[int, int] = {}
    for value in values:
        counts[value] = counts.get(value, 0) + 1
        if counts[value] > threshold:
            return value
    return None


def sort_strings(strings: Iterable[str]) -> list[str]:
    """Return the strings in lexicographic order."""
    return _selection_sorted(strings)