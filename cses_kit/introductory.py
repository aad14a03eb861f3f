"""Introductory grid and number puzzles."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator, Sequence

_KNIGHT_STEPS = (
    (1, 2), (2, 1), (2, -1), (1, -2),
    (-1, -2), (-2, -1), (-2, 1), (-1, 2),
)


def recolor_grid(grid: Sequence[str]) -> list[str]:
    """Recolour a grid so that every cell changes and no two neighbours match.

    Cells on even diagonals become ``A`` (or ``B`` if they were ``A``); cells on
    odd diagonals become ``C`` (or ``D`` if they were ``C``).
    """
    result = []
    for i, row in enumerate(grid):
        cells = []
        for j, cell in enumerate(row):
            if (i + j) % 2 == 0:
                cells.append("B" if cell == "A" else "A")
            else:
                cells.append("D" if cell == "C" else "C")
        result.append("".join(cells))
    return result


def knight_distances(n: int) -> list[list[int]]:
    """Return the minimum knight moves from the top-left corner to each square.

    Unreachable squares hold -1.
    """
    if n < 1:
        raise ValueError("board size must be positive")
    dist = [[-1] * n for _ in range(n)]
    dist[0][0] = 0
    queue = deque([(0, 0)])
    while queue:
        x, y = queue.popleft()
        for dx, dy in _KNIGHT_STEPS:
            nx, ny = x + dx, y + dy
            if 0 <= nx < n and 0 <= ny < n and dist[nx][ny] == -1:
                dist[nx][ny] = dist[x][y] + 1
                queue.append((nx, ny))
    return dist


def spiral_value(row: int, column: int) -> int:
    """Return the number at (row, column) of the infinite number spiral (1-based)."""
    if row < 1 or column < 1:
        raise ValueError("row and column must be at least 1")
    if column < row:
        odd = row % 2 == 1
        value = row * row if odd else (row - 1) ** 2 + 1
        offset = 2 * row - 1 - column
        return value - offset if odd else value + offset
    odd = column % 2 == 1
    value = column * column if odd else (column - 1) ** 2 + 1
    offset = row - 1
    return value - offset if odd else value + offset


def _hanoi(n: int, source: int, target: int, spare: int) -> Iterator[tuple[int, int]]:
    if n == 1:
        yield (source, target)
        return
    yield from _hanoi(n - 1, source, spare, target)
    yield (source, target)
    yield from _hanoi(n - 1, spare, target, source)


def hanoi_moves(n: int) -> list[tuple[int, int]]:
    """Return the optimal moves taking ``n`` disks from peg 1 to peg 3."""
    if n < 1:
        raise ValueError("number of disks must be at least 1")
    return list(_hanoi(n, 1, 3, 2))