# olympiadsolve

Solvers for nine olympiad-style programming problems, grouped by division into
bronze, silver and gold. Each solver is a plain Python function or class. It
takes Python data and returns the answer, so you can call it from your own code
or from the bundled command.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Library use

### Bronze (`olympiadsolve.bronze`)

- `count_fed_days(deliveries, target_day)` takes `(day, bales)` delivery pairs
  sorted by day. It counts the days up to `target_day` on which a bale is
  eaten. It raises `ValueError` if there are no deliveries.
- `rotate_stamp(stamp)` takes a square stamp given as rows of `'*'` and `'.'`
  and returns it turned a quarter turn counter-clockwise.
- `can_paint(canvas, stamp)` reports whether stamping the stamp, in any of its
  four rotations, can produce the canvas exactly. Both grids must be square,
  otherwise `ValueError` is raised.
- `subscription_cost(days, max_gap)` returns the total cost of covering the
  sorted watch days. The first day costs `max_gap + 1`, and each later day adds
  the gap to the previous day, capped at `max_gap + 1`. With no days the cost
  is 0.

```python
from olympiadsolve.bronze import count_fed_days, subscription_cost

count_fed_days([(1, 2), (5, 10)], 5)   # 3
subscription_cost([1, 5], 3)           # 8
```

### Silver (`olympiadsolve.silver`)

- `max_towers(cows, capacity, difference)` takes `(weight, count)` pairs. It
  returns how many cows fit into `capacity` towers when a cow may stand on
  another only if it is heavier by at least `difference`.
- `max_matching_after_rotation(total, first, second)` takes two equally long
  sequences of values from `1..total`. It returns the most positions that agree
  after the second is rotated, or reversed and rotated, plus the values missing
  from both lists. Sequences of different lengths raise `ValueError`.
- `max_targets_hit(targets, commands)` takes a command string of `L` (step
  left), `R` (step right) and `F` (fire), with the walk starting at 0. It
  returns the most distinct targets hit when at most one command is changed.
  Any other command character raises `ValueError`.

### Gold (`olympiadsolve.gold`)

- `count_direct_routes(parity_rows)` takes one row per city. Each row holds
  `'0'`/`'1'` parities of the number of routes to every later city. The
  function returns the number of direct routes implied by the table. Rows of
  the wrong length or with other characters raise `ValueError`.
- `longest_label_paths(node_count, edges)` takes `(start, end, label)` edges of
  an acyclic graph whose nodes are numbered from 1. It returns, for each node,
  a `(length, label_sum)` pair for its longest path. Ties in length go to the
  path with the smaller label sequence, and the comparison looks at up to 50
  labels. Unknown nodes or a cycle raise `ValueError`.
- `PointCost(points)` prepares a non-empty set of points. Its
  `query(left_cost, right_cost)` method returns the minimum total cost of
  gathering every point at one of the points. The cost of moving each point
  depends on whether it moves left or right.

```python
from olympiadsolve.gold import PointCost

solver = PointCost([1, 4, 9])
solver.query(1, 2)   # 13
```

## Command line

The `olympiadsolve` command solves one problem from its plain-text input and
prints the answer lines:

```
olympiadsolve PROBLEM [INPUT]
```

`PROBLEM` is one of `bronze1`, `bronze2`, `bronze3`, `silver1`, `silver2`,
`silver3`, `gold1`, `gold2` or `gold3`. `INPUT` is a file path. When it is
omitted or given as `-`, the input is read from standard input. The input is a
sequence of whitespace-separated tokens. If the input is malformed or cannot be
read, the command exits with an error message.

```
olympiadsolve --help
```

## What it does not do

The package only solves these nine problems. It does not generate test data,
check answers against expected output, or keep any results.