"""Finding values that occur an odd number of times with exclusive-or."""

from __future__ import annotations

from collections.abc import Iterable
from functools import reduce
from operator import xor


def _xor_all(values: Iterable[int]) -> int:
    return reduce(xor, values, 0)


def _lowest_bit(value: int) -> int:
    return value & -value


def single_unique(values: Iterable[int]) -> int:
    """Return the one value that is not part of a pair."""
    return _xor_all(values)


def two_uniques(values: Iterable[int]) -> tuple[int, int]:
    """Return, in ascending order, the two distinct values that are not part of a pair."""
    items = list(values)
    total = _xor_all(items)
    if total == 0:
        raise ValueError("values do not hold two distinct unpaired numbers")
    mask = _lowest_bit(total)
    first = _xor_all(v for v in items if v & mask)
    return tuple(sorted((first, first ^ total)))  # type: ignore[return-value]


def three_uniques(values: Iterable[int]) -> tuple[int, int, int]:
    """Return, in ascending order, the three distinct values that are not part of a pair."""
    items = list(values)
    total = _xor_all(items)

    def marker(value: int) -> int:
        return _lowest_bit(value ^ total)

    combined = _xor_all(marker(v) for v in items)
    if combined == 0:
        raise ValueError("values do not hold three distinct unpaired numbers")
    mark = _lowest_bit(combined)
    first = _xor_all(v for v in items if marker(v) == mark)
    second, third = two_uniques([*items, first])
    return tuple(sorted((first, second, third)))  # type: ignore[return-value]


def find_repeated(values: Iterable[int]) -> int:
    """Return the repeated value among the numbers 1..n plus one extra value."""
    items = list(values)
    if not items:
        raise ValueError("no values given")
    n = len(items) - 1
    return sum(items) - n * (n + 1) // 2