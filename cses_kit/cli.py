"""Command line front end: read a problem's input, print its answer."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable

from .dp_counting import (
    array_descriptions,
    dice_combinations,
    grid_paths,
    ordered_coin_combinations,
    unordered_coin_combinations,
)
from .dp_optimization import max_pages, min_coins, removing_digits_steps
from .graph import count_rooms, labyrinth_path, message_route, new_roads, team_assignment
from .introductory import hanoi_moves, knight_distances, recolor_grid, spiral_value
from .maths import modpow


class _Reader:
    """Whitespace-separated tokens of a problem input."""

    def __init__(self, text: str) -> None:
        self._tokens = iter(text.split())

    def word(self) -> str:
        try:
            return next(self._tokens)
        except StopIteration:
            raise ValueError("unexpected end of input") from None

    def number(self) -> int:
        token = self.word()
        try:
            return int(token)
        except ValueError:
            raise ValueError(f"expected an integer, got {token!r}") from None

    def numbers(self, count: int) -> list[int]:
        return [self.number() for _ in range(count)]

    def rows(self, count: int, width: int) -> list[str]:
        rows = [self.word() for _ in range(count)]
        for row in rows:
            if len(row) != width:
                raise ValueError(f"row {row!r} does not have width {width}")
        return rows

    def edges(self, count: int) -> list[tuple[int, int]]:
        return [(self.number(), self.number()) for _ in range(count)]


def _exponentiation(read: _Reader) -> list[str]:
    return [str(modpow(read.number(), read.number())) for _ in range(read.number())]


def _number_spiral(read: _Reader) -> list[str]:
    return [str(spiral_value(read.number(), read.number())) for _ in range(read.number())]


def _tower_of_hanoi(read: _Reader) -> list[str]:
    moves = hanoi_moves(read.number())
    return [str(len(moves))] + [f"{a} {b}" for a, b in moves]


def _grid_coloring(read: _Reader) -> list[str]:
    n, m = read.number(), read.number()
    return recolor_grid(read.rows(n, m))


def _knight_moves(read: _Reader) -> list[str]:
    return [" ".join(map(str, row)) for row in knight_distances(read.number())]


def _dice(read: _Reader) -> list[str]:
    return [str(dice_combinations(read.number()))]


def _coins_ordered(read: _Reader) -> list[str]:
    n, target = read.number(), read.number()
    return [str(ordered_coin_combinations(read.numbers(n), target))]


def _coins_unordered(read: _Reader) -> list[str]:
    n, target = read.number(), read.number()
    return [str(unordered_coin_combinations(read.numbers(n), target))]


def _minimizing_coins(read: _Reader) -> list[str]:
    n, target = read.number(), read.number()
    fewest = min_coins(read.numbers(n), target)
    return [str(-1 if fewest is None else fewest)]


def _removing_digits(read: _Reader) -> list[str]:
    return [str(removing_digits_steps(read.number()))]


def _book_shop(read: _Reader) -> list[str]:
    n, budget = read.number(), read.number()
    prices = read.numbers(n)
    pages = read.numbers(n)
    return [str(max_pages(budget, prices, pages))]


def _array_description(read: _Reader) -> list[str]:
    n, upper = read.number(), read.number()
    return [str(array_descriptions(read.numbers(n), upper))]


def _grid_paths(read: _Reader) -> list[str]:
    n = read.number()
    return [str(grid_paths(read.rows(n, n)))]


def _building_roads(read: _Reader) -> list[str]:
    n, m = read.number(), read.number()
    roads = new_roads(n, read.edges(m))
    return [str(len(roads))] + [f"{a} {b}" for a, b in roads]


def _building_teams(read: _Reader) -> list[str]:
    n, m = read.number(), read.number()
    teams = team_assignment(n, read.edges(m))
    return ["IMPOSSIBLE" if teams is None else " ".join(map(str, teams))]


def _counting_rooms(read: _Reader) -> list[str]:
    n, m = read.number(), read.number()
    return [str(count_rooms(read.rows(n, m)))]


def _labyrinth(read: _Reader) -> list[str]:
    n, m = read.number(), read.number()
    path = labyrinth_path(read.rows(n, m))
    if path is None:
        return ["NO"]
    return ["YES", str(len(path)), path]


def _message_route(read: _Reader) -> list[str]:
    n, m = read.number(), read.number()
    route = message_route(n, read.edges(m))
    if route is None:
        return ["IMPOSSIBLE"]
    return [str(len(route)), " ".join(map(str, route))]


_PROBLEMS: dict[str, Callable[[_Reader], list[str]]] = {
    "array-description": _array_description,
    "book-shop": _book_shop,
    "building-roads": _building_roads,
    "building-teams": _building_teams,
    "coin-combinations-1": _coins_ordered,
    "coin-combinations-2": _coins_unordered,
    "counting-rooms": _counting_rooms,
    "dice-combinations": _dice,
    "exponentiation": _exponentiation,
    "grid-coloring": _grid_coloring,
    "grid-paths": _grid_paths,
    "knight-moves": _knight_moves,
    "labyrinth": _labyrinth,
    "message-route": _message_route,
    "minimizing-coins": _minimizing_coins,
    "number-spiral": _number_spiral,
    "removing-digits": _removing_digits,
    "tower-of-hanoi": _tower_of_hanoi,
}


def run(problem: str, text: str) -> str:
    """Solve ``problem`` for the input ``text`` and return the output lines."""
    handler = _PROBLEMS.get(problem)
    if handler is None:
        raise ValueError(f"unknown problem {problem!r}")
    return "\n".join(handler(_Reader(text)))


def main(argv: list[str] | None = None) -> int:
    """Entry point: solve one problem from a file or standard input."""
    parser = argparse.ArgumentParser(prog="cses-kit", description="Solve a puzzle from its input.")
    parser.add_argument("problem", choices=sorted(_PROBLEMS))
    parser.add_argument("input", nargs="?", default="-", help="input file, '-' for stdin")
    args = parser.parse_args(argv)
    try:
        if args.input == "-":
            text = sys.stdin.read()
        else:
            with open(args.input, encoding="utf-8") as handle:
                text = handle.read()
        output = run(args.problem, text)
    except (OSError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())