"""Counting problems solved with dynamic programming (results modulo 1e9+7)."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from .maths import MOD


def _check_coins(coins: Iterable[int]) -> list[int]:
    values = list(coins)
    if any(c <= 0 for c in values):
        raise ValueError("coin values must be positive")
    return values


def _check_target(target: int) -> None:
    if target < 0:
        raise ValueError("target must be non-negative")


def array_descriptions(values: Sequence[int], upper: int) -> int:
    """Count arrays matching ``values`` where adjacent entries differ by at most 1.

    A zero in ``values`` is an unknown entry that may be any of 1..``upper``;
    any other entry is fixed. An empty array has exactly one description.
    """
    if upper < 1:
        raise ValueError("upper bound must be at least 1")
    if any(v < 0 for v in values):
        raise ValueError("values must be non-negative")

    counts: dict[int, int] | None = None
    for value in values:
        candidates = range(1, upper + 1) if value == 0 else (value,)
        if counts is None:
            counts = {v: 1 for v in candidates}
            continue
        previous = counts
        counts = {}
        for v in candidates:
            total = sum(previous.get(u, 0) for u in (v - 1, v, v + 1)) % MOD
            if total:
                counts[v] = total
    if counts is None:
        return 1
    return sum(counts.values()) % MOD


def ordered_coin_combinations(coins: Iterable[int], target: int) -> int:
    """Count ordered sequences of coins summing to ``target``."""
    values = _check_coins(coins)
    _check_target(target)
    ways = [1] + [0] * target
    for amount in range(1, target + 1):
        ways[amount] = sum(ways[amount - c] for c in values if c <= amount) % MOD
    return ways[target]


def unordered_coin_combinations(coins: Iterable[int], target: int) -> int:
    """Count distinct multisets of coins summing to ``target``.

    With no coins at all the count is 0, even for a target of 0.
    """
    values = _check_coins(coins)
    _check_target(target)
    if not values:
        return 0
    ways = [1] + [0] * target
    for coin in values:
        for amount in range(coin, target + 1):
            ways[amount] = (ways[amount] + ways[amount - coin]) % MOD
    return ways[target]


def dice_combinations(total: int) -> int:
    """Count ordered sequences of die throws (1..6) summing to ``total``."""
    _check_target(total)
    ways = [1] + [0] * total
    for amount in range(1, total + 1):
        ways[amount] = sum(ways[amount - face] for face in range(1, 7) if face <= amount) % MOD
    return ways[total]


def grid_paths(grid: Sequence[str]) -> int:
    """Count right/down paths from the top-left to the bottom-right of a square grid.

    Cells marked ``*`` are traps and cannot be entered.
    """
    n = len(grid)
    if n == 0:
        raise ValueError("grid must not be empty")
    if any(len(row) != n for row in grid):
        raise ValueError("grid must be square")

    ways = [0] * n
    for r, row in enumerate(grid):
        for c, cell in enumerate(row):
            if cell == "*":
                ways[c] = 0
            elif r == 0 and c == 0:
                ways[c] = 1
            elif c > 0:
                ways[c] = (ways[c] + ways[c - 1]) % MOD
    return ways[n - 1]