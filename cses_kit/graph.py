"""Graph and grid traversal problems."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence

_MOVES = (("U", -1, 0), ("R", 0, 1), ("D", 1, 0), ("L", 0, -1))


def _adjacency(n: int, edges: Iterable[tuple[int, int]]) -> list[list[int]]:
    if n < 0:
        raise ValueError("number of nodes must be non-negative")
    adj: list[list[int]] = [[] for _ in range(n + 1)]
    for u, v in edges:
        if not (1 <= u <= n and 1 <= v <= n):
            raise ValueError(f"edge ({u}, {v}) has an endpoint outside 1..{n}")
        adj[u].append(v)
        adj[v].append(u)
    return adj


def _neighbours(grid: Sequence[str], r: int, c: int):
    for _, dr, dc in _MOVES:
        nr, nc = r + dr, c + dc
        if 0 <= nr < len(grid) and 0 <= nc < len(grid[nr]) and grid[nr][nc] != "#":
            yield nr, nc


def new_roads(n: int, edges: Iterable[tuple[int, int]]) -> list[tuple[int, int]]:
    """Return the fewest new roads that connect every city.

    The lowest-numbered city of each component is its representative, and
    consecutive representatives are joined.
    """
    adj = _adjacency(n, edges)
    seen = [False] * (n + 1)
    leaders = []
    for start in range(1, n + 1):
        if seen[start]:
            continue
        leaders.append(start)
        seen[start] = True
        stack = [start]
        while stack:
            u = stack.pop()
            for v in adj[u]:
                if not seen[v]:
                    seen[v] = True
                    stack.append(v)
    return list(zip(leaders, leaders[1:]))


def team_assignment(n: int, edges: Iterable[tuple[int, int]]) -> list[int] | None:
    """Split pupils into teams 1 and 2 so that friends are never together.

    The lowest-numbered pupil of each component goes to team 1. Returns
    ``None`` if no such split exists.
    """
    adj = _adjacency(n, edges)
    team = [0] * (n + 1)
    for start in range(1, n + 1):
        if team[start]:
            continue
        team[start] = 1
        queue = deque([start])
        while queue:
            u = queue.popleft()
            for v in adj[u]:
                if team[v] == team[u]:
                    return None
                if not team[v]:
                    team[v] = 3 - team[u]
                    queue.append(v)
    return team[1:]


def count_rooms(grid: Sequence[str]) -> int:
    """Count the rooms of a map: connected regions of floor, ``#`` being wall."""
    visited: set[tuple[int, int]] = set()
    rooms = 0
    for r, row in enumerate(grid):
        for c, cell in enumerate(row):
            if cell != "." or (r, c) in visited:
                continue
            rooms += 1
            visited.add((r, c))
            stack = [(r, c)]
            while stack:
                cr, cc = stack.pop()
                for cell_pos in _neighbours(grid, cr, cc):
                    if cell_pos not in visited:
                        visited.add(cell_pos)
                        stack.append(cell_pos)
    return rooms


def _locate(grid: Sequence[str], mark: str) -> tuple[int, int]:
    found = None
    for r, row in enumerate(grid):
        for c, cell in enumerate(row):
            if cell == mark:
                found = (r, c)
    if found is None:
        raise ValueError(f"map has no {mark!r} cell")
    return found


def labyrinth_path(grid: Sequence[str]) -> str | None:
    """Return a shortest path from ``A`` to ``B`` as a string of U, R, D, L moves.

    Returns ``None`` if ``B`` cannot be reached.
    """
    start = _locate(grid, "A")
    end = _locate(grid, "B")
    came_by: dict[tuple[int, int], tuple[str, tuple[int, int]]] = {}
    visited = {start}
    queue = deque([start])
    while queue:
        pos = queue.popleft()
        if pos == end:
            steps = []
            while pos != start:
                letter, pos = came_by[pos]
                steps.append(letter)
            return "".join(reversed(steps))
        r, c = pos
        for letter, dr, dc in _MOVES:
            nr, nc = r + dr, c + dc
            nxt = (nr, nc)
            if (
                0 <= nr < len(grid)
                and 0 <= nc < len(grid[nr])
                and grid[nr][nc] != "#"
                and nxt not in visited
            ):
                visited.add(nxt)
                came_by[nxt] = (letter, pos)
                queue.append(nxt)
    return None


def message_route(n: int, edges: Iterable[tuple[int, int]]) -> list[int] | None:
    """Return a shortest route of computers from 1 to ``n``, or ``None`` if none exists."""
    if n < 1:
        raise ValueError("number of computers must be at least 1")
    adj = _adjacency(n, edges)
    parent: list[int | None] = [None] * (n + 1)
    parent[1] = 0
    queue = deque([1])
    while queue:
        u = queue.popleft()
        for v in adj[u]:
            if parent[v] is None:
                parent[v] = u
                queue.append(v)
    if parent[n] is None:
        return None
    route = []
    node = n
    while node != 0:
        route.append(node)
        node = parent[node]
    route.reverse()
    return route