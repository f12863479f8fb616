"""Bronze-division solvers: hay deliveries, stamp painting and subscriptions."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import pairwise


def count_fed_days(deliveries: Iterable[tuple[int, int]], target_day: int) -> int:
    """Count the days up to ``target_day`` on which one bale is eaten.

    ``deliveries`` holds ``(day, bales)`` pairs in increasing day order.
    """
    schedule = [[day, bales] for day, bales in deliveries]
    if not schedule:
        raise ValueError("at least one delivery is required")

    if schedule[-1][0] < target_day:
        schedule.append([target_day, 0])
    else:
        cut = next(
            index for index, (day, _) in enumerate(schedule) if day >= target_day
        )
        del schedule[cut + 1:]
        schedule[cut][1] = target_day

    fed = 0
    stock = 0
    for (day, bales), (next_day, _) in pairwise(schedule):
        span = next_day - day
        stock += bales
        fed += min(span, stock)
        stock = max(stock - span, 0)

    if stock + schedule[-1][1] > 0:
        fed += 1
    return fed


def _check_square(grid: Sequence[str], name: str) -> None:
    size = len(grid)
    if any(len(row) != size for row in grid):
        raise ValueError(f"{name} must be a square grid")


def rotate_stamp(stamp: Sequence[str]) -> list[str]:
    """Return the stamp turned a quarter turn counter-clockwise."""
    _check_square(stamp, "stamp")
    return ["".join(column) for column in zip(*stamp)][::-1]


def can_paint(canvas: Sequence[str], stamp: Sequence[str]) -> bool:
    """Tell whether the canvas can be made by stamping in any rotation.

    Grids are sequences of equal-length strings of ``'*'`` and ``'.'``.
    """
    _check_square(canvas, "canvas")
    _check_square(stamp, "stamp")
    size = len(canvas)
    stamp_size = len(stamp)
    painted = [[False] * size for _ in range(size)]

    current = list(stamp)
    for _ in range(4):
        current = rotate_stamp(current)
        inked = [
            (row, col)
            for row, line in enumerate(current)
            for col, cell in enumerate(line)
            if cell == "*"
        ]
        for top in range(size - stamp_size + 1):
            for left in range(size - stamp_size + 1):
                if all(canvas[top + row][left + col] != "." for row, col in inked):
                    for row, col in inked:
                        painted[top + row][left + col] = True

    return all(
        cell == ("*" if mark else ".")
        for line, marks in zip(canvas, painted)
        for cell, mark in zip(line, marks)
    )


def subscription_cost(days: Iterable[int], max_gap: int) -> int:
    """Total cost of covering the sorted watch days with subscriptions."""
    ordered = list(days)
    if not ordered:
        return 0
    block = max_gap + 1
    return block + sum(min(later - earlier, block) for earlier, later in pairwise(ordered))