"""Arbitrary-size signed integers held as decimal digits."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import zip_longest

_DIGITS = "0123456789"


def _digits_of(text: str) -> tuple[int, ...]:
    """Return the digits of an unsigned decimal string, least significant first."""
    if not text or any(char not in _DIGITS for char in text):
        raise ValueError(f"not a decimal number: {text!r}")
    return tuple(int(char) for char in reversed(text))


def _strip_high_zeros(digits: tuple[int, ...]) -> tuple[int, ...]:
    end = len(digits)
    while end > 1 and digits[end - 1] == 0:
        end -= 1
    return digits[:end]


def _add_magnitudes(first: tuple[int, ...], second: tuple[int, ...]) -> tuple[int, ...]:
    result = []
    carry = 0
    for a, b in zip_longest(first, second, fillvalue=0):
        carry, digit = divmod(a + b + carry, 10)
        result.append(digit)
    if carry:
        result.append(carry)
    return tuple(result)


def _sub_magnitudes(larger: tuple[int, ...], smaller: tuple[int, ...]) -> tuple[int, ...]:
    result = []
    borrow = 0
    for a, b in zip_longest(larger, smaller, fillvalue=0):
        digit = a - borrow - b
        borrow = 0
        if digit < 0:
            digit += 10
            borrow = 1
        result.append(digit)
    return _strip_high_zeros(tuple(result))


def _compare_magnitudes(first: tuple[int, ...], second: tuple[int, ...]) -> int:
    key_first = (len(first), first[::-1])
    key_second = (len(second), second[::-1])
    return (key_first > key_second) - (key_first < key_second)


@dataclass(frozen=True)
class BigInt:
    """A signed integer of any size; ``digits`` are least significant first."""

    digits: tuple[int, ...]
    sign: int = 1

    def __post_init__(self) -> None:
        if self.sign not in (1, -1):
            raise ValueError(f"sign must be 1 or -1: {self.sign}")
        if not self.digits or any(not 0 <= d <= 9 for d in self.digits):
            raise ValueError(f"invalid digits: {self.digits!r}")
        digits = _strip_high_zeros(tuple(self.digits))
        object.__setattr__(self, "digits", digits)
        if digits == (0,):
            object.__setattr__(self, "sign", 1)

    @classmethod
    def parse(cls, text: str) -> BigInt:
        """Read an optionally signed decimal string such as ``-00123``."""
        text = text.strip()
        sign = 1
        if text[:1] == "-":
            sign = -1
            text = text[1:]
        elif text[:1] == "+":
            text = text[1:]
        return cls(_digits_of(text), sign)

    def __add__(self, other: object) -> BigInt:
        if not isinstance(other, BigInt):
            return NotImplemented
        if self.sign == other.sign:
            return BigInt(_add_magnitudes(self.digits, other.digits), self.sign)
        order = _compare_magnitudes(self.digits, other.digits)
        if order == 0:
            return BigInt((0,))
        if order > 0:
            return BigInt(_sub_magnitudes(self.digits, other.digits), self.sign)
        return BigInt(_sub_magnitudes(other.digits, self.digits), other.sign)

    def __str__(self) -> str:
        prefix = "-" if self.sign < 0 else ""
        return prefix + "".join(str(d) for d in reversed(self.digits))


def add_unsigned(first: str, second: str) -> str:
    """Add two unsigned decimal strings; the result is at least as wide as the wider one."""
    total = _add_magnitudes(_digits_of(first), _digits_of(second))
    return "".join(str(d) for d in reversed(total))


def big_add(first: str, second: str) -> str:
    """Add two signed decimal strings and return the sum as a string."""
    return str(BigInt.parse(first) + BigInt.parse(second))