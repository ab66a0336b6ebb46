"""Conversions between decimal, binary and hexadecimal notation."""

from __future__ import annotations

_HEX_DIGITS = "0123456789ABCDEF"
INT_BITS = 32
_INT_MIN = -(1 << (INT_BITS - 1))
_INT_MAX = (1 << (INT_BITS - 1)) - 1


def _to_base(num: int, base: int) -> str:
    if num < 0:
        raise ValueError(f"only non-negative integers are supported: {num}")
    if num == 0:
        return "0"
    digits = []
    while num:
        num, remainder = divmod(num, base)
        digits.append(_HEX_DIGITS[remainder])
    return "".join(reversed(digits))


def decimal_to_binary(num: int) -> str:
    """Return the binary digits of a non-negative integer."""
    return _to_base(num, 2)


def binary_to_decimal(text: str) -> int:
    """Return the value of a string of binary digits."""
    value = 0
    for char in text:
        if char not in "01":
            raise ValueError(f"not a binary digit: {char!r}")
        value = (value << 1) | (char == "1")
    return value


def decimal_to_hex(num: int) -> str:
    """Return the upper-case hexadecimal digits of a non-negative integer."""
    return _to_base(num, 16)


def hex_char_value(char: str) -> int:
    """Return the value of one hexadecimal digit, either case."""
    if len(char) != 1:
        raise ValueError(f"expected a single character: {char!r}")
    value = _HEX_DIGITS.find(char.upper())
    if value < 0:
        raise ValueError(f"not a hexadecimal digit: {char!r}")
    return value


def hex_to_decimal(text: str) -> int:
    """Return the value of a hexadecimal string, with or without a 0x prefix."""
    if len(text) > 2 and text[0] == "0" and text[1] in "xX":
        text = text[2:]
    value = 0
    for char in text:
        value = value * 16 + hex_char_value(char)
    return value


def count_one_bits(num: int) -> int:
    """Return how many bits are set in the 32-bit two's-complement form of ``num``."""
    if not _INT_MIN <= num <= _INT_MAX:
        raise ValueError(f"not a {INT_BITS}-bit signed integer: {num}")
    return bin(num & ((1 << INT_BITS) - 1)).count("1")