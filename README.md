# cses-kit

Solutions to a selection of CSES problem-set tasks. You can use them as a
Python library or from the command line.

## Modules

- `cses_kit.maths`
  - `modpow(base, exponent)` returns `base ** exponent` modulo 10^9+7.
  - 0^0 counts as 1.
  - A negative exponent raises `ValueError`.
- `cses_kit.introductory`
  - `recolor_grid(grid)` returns a grid in which every cell has changed and no two neighbouring cells are the same.
  - `knight_distances(n)` returns the fewest knight moves from the top-left corner to each square of an n×n board. It holds -1 for a square the knight cannot reach.
  - `spiral_value(row, column)` returns the number at a 1-based position of the number spiral.
  - `hanoi_moves(n)` returns the list of `(from, to)` peg moves that take n disks from peg 1 to peg 3.
- `cses_kit.dp_counting` (all counts are reduced modulo 10^9+7)
  - `array_descriptions(values, upper)`: in `values`, a 0 marks an unknown entry in 1..`upper`. Adjacent entries may differ by at most 1.
  - `ordered_coin_combinations(coins, target)`
  - `unordered_coin_combinations(coins, target)` returns 0 when there are no coins.
  - `dice_combinations(total)`
  - `grid_paths(grid)` counts right/down paths through a square grid. Cells marked `*` are traps.
- `cses_kit.dp_optimization`
  - `max_pages(budget, prices, pages)` solves the 0/1 knapsack for books.
  - `min_coins(coins, target)` returns the fewest coins, or `None` if the target cannot be made.
  - `removing_digits_steps(n)`
- `cses_kit.graph`
  - `new_roads(n, edges)` returns the roads that link the lowest-numbered city of each component to the next component's.
  - `team_assignment(n, edges)` returns a list of teams 1/2, or `None` if no split is possible.
  - `count_rooms(grid)`
  - `labyrinth_path(grid)` returns a shortest `U`/`R`/`D`/`L` string from `A` to `B`.
    - It returns `None` if `B` cannot be reached.
    - It raises `ValueError` if the map has no `A` or no `B`.
  - `message_route(n, edges)` returns a shortest list of nodes from 1 to n, or `None` if there is no route.
- `cses_kit.cli`
  - `run(problem, text)` solves a problem from its raw input text and returns the output text.
  - `main(argv=None)` is the command-line entry point.

Invalid arguments raise `ValueError`, for example:

- negative targets;
- non-positive coin values;
- edge endpoints outside 1..n.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Library use

```python
from cses_kit.maths import modpow
from cses_kit.introductory import spiral_value
from cses_kit.dp_counting import dice_combinations
from cses_kit.dp_optimization import min_coins

modpow(3, 4)                 # 81
spiral_value(2, 3)           # 8
dice_combinations(3)         # 4
min_coins([1, 5, 7], 11)     # 3
```

## Command line

```
cses-kit <problem> [input]
```

The command reads the problem's input, in the CSES input format, from the file
`input`. It reads from standard input when `input` is omitted or is `-`. It
prints the answer in the CSES output format.

The problem names are:

`array-description`, `book-shop`, `building-roads`, `building-teams`,
`coin-combinations-1`, `coin-combinations-2`, `counting-rooms`,
`dice-combinations`, `exponentiation`, `grid-coloring`, `grid-paths`,
`knight-moves`, `labyrinth`, `message-route`, `minimizing-coins`,
`number-spiral`, `removing-digits`, `tower-of-hanoi`

If the input is malformed or cannot be read, the command prints `error: ...`
to standard error and exits with status 1.

Python code can do the same through `cses_kit.cli.run`:

```python
from cses_kit.cli import run

print(run("exponentiation", "1\n3 4\n"))   # 81
```

## Limits

The command solves one input per run. It does not fetch problems, submit
solutions or check answers against expected output.