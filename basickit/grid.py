"""Matrix products, spiral fills and lattice path counts."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence

Matrix = list[list[int]]

_DIRECTIONS = ((0, 1), (1, 0), (0, -1), (-1, 0))


def _rectangular(matrix: Iterable[Iterable[int]], name: str) -> Matrix:
    rows = [list(row) for row in matrix]
    if not rows:
        raise ValueError(f"{name} has no rows")
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError(f"{name} rows differ in length")
    return rows


def matrix_multiply(
    first: Iterable[Iterable[int]], second: Iterable[Iterable[int]]
) -> Matrix:
    """Return the product of two matrices given as lists of rows."""
    a = _rectangular(first, "first matrix")
    b = _rectangular(second, "second matrix")
    if len(a[0]) != len(b):
        raise ValueError(
            f"cannot multiply {len(a)}x{len(a[0])} by {len(b)}x{len(b[0])}"
        )
    columns = list(zip(*b))
    return [[sum(x * y for x, y in zip(row, col)) for col in columns] for row in a]


def snake_matrix(n: int) -> Matrix:
    """Return an n-by-n matrix filled with 1..n*n in a clockwise spiral."""
    if n < 1:
        raise ValueError(f"size must be positive: {n}")
    grid = [[0] * n for _ in range(n)]
    direction = 0
    row = col = 0
    grid[row][col] = 1
    for number in range(2, n * n + 1):
        dr, dc = _DIRECTIONS[direction]
        nr, nc = row + dr, col + dc
        if not (0 <= nr < n and 0 <= nc < n and grid[nr][nc] == 0):
            direction = (direction + 1) % 4
            dr, dc = _DIRECTIONS[direction]
            nr, nc = row + dr, col + dc
        row, col = nr, nc
        grid[row][col] = number
    return grid


def count_grid_paths(m: int, n: int) -> int:
    """Return the number of right/down paths from (0, 0) to (m, n)."""
    if m == 0 or n == 0:
        return 1
    if m < 0 or n < 0:
        return 0
    return math.comb(m + n, m)


def format_matrix(matrix: Iterable[Sequence[int]], width: int = 4) -> str:
    """Return the matrix as text, each entry right-aligned in ``width`` columns."""
    return "\n".join(
        "".join(f"{value:>{width}}" for value in row) for row in matrix
    )