# cpalgos

Classic competitive-programming algorithms in plain Python, with no
third-party dependencies.

## What is inside

| Module | Contents |
| --- | --- |
| `cpalgos.knapsack` | `knapsack_small_capacity` (0-1 or unbounded), `knapsack_small_value`, and `knapsack_meet_in_middle`, which returns a bit mask of the chosen items |
| `cpalgos.geometry` | `Point` (tolerant comparison, `dot`, `cross`, `dist`, `unit`, `perp`, `normal`, `rotate`, ...), `sgn`, `line_inter`, `line_dist`, `on_segment`, `seg_inter`, `seg_dist`, `circle_line`, `circle_inter`, `count_circle_regions` |
| `cpalgos.bfs` | `bfs` with an optional edge-weight limit, returning level and parent dicts; `min_bottleneck_path` for a path of bounded length whose heaviest edge is as light as possible |
| `cpalgos.lca` | `SparseTable` range-minimum queries and `LCA` with `lca` and `dist` |
| `cpalgos.hld` | `HLD` heavy-light decomposition over a lazy max segment tree (`LazySegmentNode`): path add/assign, path and subtree max, current values |
| `cpalgos.simplex` | `LPSolver(A, b, c).solve()` maximises `c·x` subject to `A x <= b, x >= 0`; returns `(optimum, x)`, with `-inf` when infeasible and `inf` when unbounded |
| `cpalgos.derangement` | `derangement`, a rearrangement in which no position keeps its value, or `None` when impossible |
| `cpalgos.nqueens` | `solve_n_queens`, every N-queens board as rows of `Q` and `.` |
| `cpalgos.bigint` | `to_int`, `to_string`, `char_to_digit`, `digit_to_char` for integers in bases 2 to 36 |
| `cpalgos.kmp` | `prefix_function` and `match` (overlapping occurrences) |
| `cpalgos.manacher` | `Manacher` palindrome radii with `is_palindrome`, and `largest_palindromic_square` for a square grid |

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Library examples

```python
from cpalgos.kmp import match, prefix_function
from cpalgos.bigint import to_int, to_string
from cpalgos.nqueens import solve_n_queens

match("abababa", "aba")          # [0, 2, 4]
prefix_function("aabaaab")       # [0, 1, 0, 1, 2, 2, 3]
to_string(255, 16)               # "ff"
to_int("-ff", 16)                # -255
len(solve_n_queens(8))           # 92
```

```python
from cpalgos.geometry import Point, seg_inter
from cpalgos.lca import LCA

seg_inter(Point(0, 0), Point(2, 2), Point(0, 2), Point(2, 0))  # one point, at (1, 1)

tree = [[1, 2], [0, 3], [0], [1]]
LCA(tree).dist(3, 2)             # 3
```

## Command-line tools

Each tool reads one problem instance from standard input, whitespace
separated, and writes the answer to standard output:

```
cpalgos-knapsack      # "n c" then n "weight value" pairs; prints the count and 1-based indices chosen
cpalgos-circles       # "n" then n "x y r" circles; prints the number of regions
cpalgos-bfs           # "n m d" then m directed "u v w" edges; prints the path length and path, or -1
cpalgos-lca           # "n q", n-1 edges, q queries; prints each distance
cpalgos-derangement   # test cases of integer sequences; prints Yes and a derangement, or No
cpalgos-hld           # weighted trees with CHANGE / QUERY commands ending in DONE
cpalgos-simplex       # small two-variable linear programs; prints the value or "No Solution"
cpalgos-kmp           # pattern / text line pairs; prints match positions
cpalgos-manacher      # "n" then an n by n grid; prints the largest palindromic square
```

For example:

```
printf 'aba\nabababa\n' | cpalgos-kmp
```

prints `0 2 4`.

The `nqueens` and `bigint` modules are library-only and have no command.