"""Small string utilities: counting, reshaping and comparing text."""

from __future__ import annotations

from typing import NamedTuple

_BAR = "*****"
_GAP = "   "
_BAR_WIDTH = len(_BAR)
_DIGITS = "0123456789"
_LOWER = "abcdefghijklmnopqrstuvwxyz"
_LETTERS = _LOWER + _LOWER.upper()


class CategoryCounts(NamedTuple):
    """How many letters, digits and other characters a text holds."""

    alpha: int
    digits: int
    other: int


def count_categories(text: str) -> CategoryCounts:
    """Count ASCII letters, ASCII digits and every other character in ``text``."""
    digits = sum(char in _DIGITS for char in text)
    alpha = sum(char in _LETTERS for char in text)
    return CategoryCounts(alpha, digits, len(text) - alpha - digits)


def _centered(count: int) -> str:
    label = str(count)
    padding = max(0, _BAR_WIDTH - len(label))
    left = padding // 2
    return " " * left + label + " " * (padding - left)


def category_chart(alpha: int, digits: int, other: int) -> str:
    """Return a bar chart of the three counts, tallest bar first."""
    categories = [("alp", alpha), ("num", digits), ("oth", other)]
    if any(count < 0 for _, count in categories):
        raise ValueError("counts must not be negative")
    for i in range(len(categories)):
        best = max(range(i, len(categories)), key=lambda j: categories[j][1])
        categories[i], categories[best] = categories[best], categories[i]

    highest = categories[0][1]
    lines = []
    for level in range(highest, -1, -1):
        if level == highest:
            lines.append(_centered(highest))
            continue
        parts = [_BAR]
        for _, count in categories[1:]:
            if count == level:
                parts.append(_GAP + _centered(count))
                break
            if count > level:
                parts.append(_GAP + _BAR)
        lines.append("".join(parts))
    names = [name for name, _ in categories]
    lines.append(" " + "     ".join(names))
    return "\n".join(lines)


def split_digits_letters(text: str) -> str:
    """Move every digit to the front, keeping the order within each part."""
    digits = "".join(char for char in text if char in _DIGITS)
    rest = "".join(char for char in text if char not in _DIGITS)
    return digits + rest


def replace_spaces(text: str) -> str:
    """Replace every space with ``%020``."""
    return text.replace(" ", "%020")


def remove_char(text: str, char: str) -> str:
    """Remove every occurrence of ``char`` from ``text``."""
    if len(char) != 1:
        raise ValueError(f"expected a single character: {char!r}")
    return text.replace(char, "")


def remove_duplicates(text: str) -> str:
    """Keep only the first occurrence of each character."""
    return "".join(dict.fromkeys(text))


def remove_extra_spaces(text: str) -> str:
    """Drop leading and trailing spaces and collapse runs of spaces to one."""
    return " ".join(word for word in text.split(" ") if word)


def split_words(text: str) -> list[str]:
    """Return the space-separated words of ``text``."""
    return [word for word in text.split(" ") if word]


def compare_strings(first: str, second: str) -> int:
    """Return 1, -1 or 0 as ``first`` sorts after, before or equal to ``second``."""
    return (first > second) - (first < second)


def to_upper_letters(text: str) -> str:
    """Upper-case the lower-case letters read before the first ``?``, dropping all else."""
    head, _, _ = text.partition("?")
    return "".join(char.upper() for char in head if char in _LOWER)