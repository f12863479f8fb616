"""Command-line front end: solve one problem from its plain-text input."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable
from pathlib import Path

from olympiadsolve.bronze import can_paint, count_fed_days, subscription_cost
from olympiadsolve.gold import PointCost, count_direct_routes, longest_label_paths
from olympiadsolve.silver import (
    max_matching_after_rotation,
    max_targets_hit,
    max_towers,
)


class _Tokens:
    """Whitespace-separated tokens of an input text."""

    def __init__(self, text: str) -> None:
        self._words = iter(text.split())

    def word(self) -> str:
        try:
            return next(self._words)
        except StopIteration:
            raise ValueError("unexpected end of input") from None

    def number(self) -> int:
        value = self.word()
        try:
            return int(value)
        except ValueError:
            raise ValueError(f"expected an integer, got {value!r}") from None

    def numbers(self, count: int) -> list[int]:
        return [self.number() for _ in range(count)]

    def pairs(self, count: int) -> list[tuple[int, int]]:
        return [(self.number(), self.number()) for _ in range(count)]


def _bronze1(tokens: _Tokens) -> list[str]:
    count, target = tokens.number(), tokens.number()
    return [str(count_fed_days(tokens.pairs(count), target))]


def _bronze2(tokens: _Tokens) -> list[str]:
    answers = []
    for _ in range(tokens.number()):
        canvas = [tokens.word() for _ in range(tokens.number())]
        stamp = [tokens.word() for _ in range(tokens.number())]
        answers.append("YES" if can_paint(canvas, stamp) else "NO")
    return answers


def _bronze3(tokens: _Tokens) -> list[str]:
    count, gap = tokens.number(), tokens.number()
    return [str(subscription_cost(tokens.numbers(count), gap))]


def _silver1(tokens: _Tokens) -> list[str]:
    count, capacity, difference = tokens.number(), tokens.number(), tokens.number()
    return [str(max_towers(tokens.pairs(count), capacity, difference))]


def _silver2(tokens: _Tokens) -> list[str]:
    total, length = tokens.number(), tokens.number()
    first = tokens.numbers(length)
    second = tokens.numbers(length)
    return [str(max_matching_after_rotation(total, first, second))]


def _silver3(tokens: _Tokens) -> list[str]:
    count, _length = tokens.number(), tokens.number()
    targets = tokens.numbers(count)
    return [str(max_targets_hit(targets, tokens.word()))]


def _gold1(tokens: _Tokens) -> list[str]:
    cities = tokens.number()
    rows = [tokens.word() for _ in range(cities - 1)]
    return [str(count_direct_routes(rows))]


def _gold2(tokens: _Tokens) -> list[str]:
    nodes, edge_count = tokens.number(), tokens.number()
    edges = [
        (tokens.number(), tokens.number(), tokens.number()) for _ in range(edge_count)
    ]
    return [f"{length} {total}" for length, total in longest_label_paths(nodes, edges)]


def _gold3(tokens: _Tokens) -> list[str]:
    solver = PointCost(tokens.numbers(tokens.number()))
    return [str(solver.query(left, right)) for left, right in tokens.pairs(tokens.number())]


_SOLVERS: dict[str, Callable[[_Tokens], list[str]]] = {
    "bronze1": _bronze1,
    "bronze2": _bronze2,
    "bronze3": _bronze3,
    "silver1": _silver1,
    "silver2": _silver2,
    "silver3": _silver3,
    "gold1": _gold1,
    "gold2": _gold2,
    "gold3": _gold3,
}


def main(argv: list[str] | None = None) -> int:
    """Read a problem's input, solve it and print the answer lines."""
    parser = argparse.ArgumentParser(
        prog="olympiadsolve", description="Solve one contest problem."
    )
    parser.add_argument("problem", choices=sorted(_SOLVERS), help="problem to solve")
    parser.add_argument(
        "input", nargs="?", default="-", help="input file, or '-' for standard input"
    )
    args = parser.parse_args(argv)

    try:
        text = sys.stdin.read() if args.input == "-" else Path(args.input).read_text()
    except OSError as exc:
        parser.error(f"cannot read {args.input}: {exc.strerror or exc}")

    try:
        lines = _SOLVERS[args.problem](_Tokens(text))
    except ValueError as exc:
        parser.error(str(exc))

    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())