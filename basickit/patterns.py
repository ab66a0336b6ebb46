"""Star patterns and the multiplication table drawn as text."""

from __future__ import annotations


def _text(lines: list[str]) -> str:
    return "\n".join(lines) + "\n"


def _check_size(n: int) -> None:
    if n < 1:
        raise ValueError(f"size must be positive: {n}")


def multiplication_table() -> str:
    """Return the 9x9 multiplication table as a lower triangle."""
    return _text(
        [
            "".join(f"{j}x{i}={j * i:<3d}" for j in range(1, i + 1))
            for i in range(1, 10)
        ]
    )


def _mirrored(n: int, row) -> str:
    rows = list(range(1, n + 1)) + list(range(n - 1, 0, -1))
    return _text([" " * (n - i) + row(i) for i in rows])


def diamond(n: int = 5) -> str:
    """Return a filled diamond of stars with ``n`` rows in its upper half."""
    _check_size(n)
    return _mirrored(n, lambda i: "*" if i == 1 else "* " * i)


def hollow_diamond(n: int = 5) -> str:
    """Return the outline of a diamond with ``n`` rows in its upper half."""
    _check_size(n)
    return _mirrored(n, lambda i: "*" if i == 1 else "*" + " " * (2 * i - 3) + "*")


def heart(n: int = 8) -> str:
    """Return a heart of stars whose lower part is ``n`` rows tall."""
    _check_size(n)
    line_up = n // 2 + 1 if n % 2 else n // 2
    lines = []
    for i in range(2, line_up):
        stars = " ".join("*" * i)
        lead = line_up - i
        middle = 2 * lead - 1 if n % 2 else 2 * lead + 1
        lines.append(" " * lead + stars + " " * middle + stars)
    for i in range(1, n + 1):
        lines.append(" " * (i - 1) + " ".join("*" * (n - i + 1)))
    return _text(lines)