"""Optimisation problems solved with dynamic programming."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def max_pages(budget: int, prices: Sequence[int], pages: Sequence[int]) -> int:
    """Return the most pages obtainable buying each book at most once within ``budget``."""
    if budget < 0:
        raise ValueError("budget must be non-negative")
    if len(prices) != len(pages):
        raise ValueError("prices and pages must have the same length")
    if any(p < 0 for p in prices):
        raise ValueError("prices must be non-negative")
    if any(p < 0 for p in pages):
        raise ValueError("page counts must be non-negative")

    best = [0] * (budget + 1)
    for price, count in zip(prices, pages):
        for spend in range(budget, price - 1, -1):
            candidate = best[spend - price] + count
            if candidate > best[spend]:
                best[spend] = candidate
    return best[budget]


def min_coins(coins: Iterable[int], target: int) -> int | None:
    """Return the fewest coins summing to ``target``, or ``None`` if it cannot be made."""
    values = list(coins)
    if any(c <= 0 for c in values):
        raise ValueError("coin values must be positive")
    if target < 0:
        raise ValueError("target must be non-negative")

    fewest: list[int | None] = [0] + [None] * target
    for amount in range(1, target + 1):
        options = [
            fewest[amount - c]
            for c in values
            if c <= amount and fewest[amount - c] is not None
        ]
        if options:
            fewest[amount] = 1 + min(options)
    return fewest[target]


def _digits(number: int) -> set[int]:
    return {int(ch) for ch in str(number)}


def removing_digits_steps(n: int) -> int:
    """Return the fewest steps to reach zero, each step subtracting a digit of the number."""
    if n < 0:
        raise ValueError("number must be non-negative")
    steps = [0] * (n + 1)
    for value in range(1, n + 1):
        steps[value] = 1 + min(steps[value - d] for d in _digits(value) if d > 0)
    return steps[n]