"""Text calendars for a month or a whole year, weeks starting on Monday."""

from __future__ import annotations

from basickit.dates import Date, date_to_days, month_days

DAY_LABELS = ("MON", "TUE", "WED", "THU", "FRI", "SAT", "SUN")
BLOCK_LINES = 7
BLOCK_WIDTH = 31
_CELL = 4
_MARGIN = " " * 3


def first_weekday(year: int, month: int) -> int:
    """Return the weekday of the month's first day, 1 for Monday to 7 for Sunday."""
    return date_to_days(Date(year, month, 1)) % 7 + 1


def _header() -> str:
    return "".join(f"{label:>{_CELL}}" for label in DAY_LABELS)


def _weeks(year: int, month: int) -> tuple[list[str], str]:
    """Return the completed week rows and the unfinished last row."""
    cells = [" " * _CELL] * (first_weekday(year, month) - 1)
    rows: list[str] = []
    for day in range(1, month_days(year, month) + 1):
        cells.append(f"{day:{_CELL}d}")
        if len(cells) == 7:
            rows.append("".join(cells))
            cells = []
    return rows, "".join(cells)


def month_calendar(year: int, month: int) -> str:
    """Return a month's calendar: a header line, then one line per week."""
    rows, rest = _weeks(year, month)
    lines = [_header(), *rows]
    if rest:
        lines.append(rest)
    return "\n".join(lines)


def month_block(year: int, month: int) -> list[str]:
    """Return the seven lines that show one month inside a year calendar."""
    rows, rest = _weeks(year, month)
    lines = [f"{month:<3d}{_header()}"]
    lines.extend(_MARGIN + row for row in rows)
    lines.append(_MARGIN + rest)
    lines.extend("" for _ in range(BLOCK_LINES - len(lines)))
    return lines


def year_calendar(year: int) -> str:
    """Return a whole year's calendar, months 1-6 beside months 7-12."""
    lines = []
    for month in range(1, 7):
        left = month_block(year, month)
        right = month_block(year, month + 6)
        lines.extend(
            f"{a:<{BLOCK_WIDTH}}{_MARGIN}{b:<{BLOCK_WIDTH}}"
            for a, b in zip(left, right)
        )
    return "\n".join(lines) + "\n"