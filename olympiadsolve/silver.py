"""Silver-division solvers: cow towers, rotated matchings and target practice."""

from __future__ import annotations

from collections import Counter, deque
from collections.abc import Iterable, Sequence
from itertools import accumulate

_MOVES = {"L": -1, "R": 1, "F": 0}

# (command that is changed, shift applied to later shots, whether it now fires)
_CHANGES = (
    ("L", 1, True),
    ("L", 2, False),
    ("R", -1, True),
    ("R", -2, False),
    ("F", -1, False),
    ("F", 1, False),
)


def max_towers(
    cows: Iterable[tuple[int, int]], capacity: int, difference: int
) -> int:
    """Most cows that fit into ``capacity`` towers.

    ``cows`` holds ``(weight, count)`` pairs. A cow may stand on another only
    when it is heavier by at least ``difference``.
    """
    groups = sorted((weight, count) for weight, count in cows)
    total = sum(count for _, count in groups)

    bottoms: list[tuple[int, int]] = []
    leftovers: list[tuple[int, int]] = []
    room = capacity
    for weight, count in groups:
        if count <= room:
            bottoms.append((weight, count))
            room -= count
        else:
            count -= room
            if room:
                bottoms.append((weight, room))
            room = 0
            leftovers.append((weight, count))

    tops = deque(bottoms)
    excluded = 0
    for weight, count in leftovers:
        if not tops or weight - tops[0][0] < difference:
            excluded += count
            continue

        moved = 0
        while tops and weight - tops[0][0] >= difference and count > 0:
            front_count = tops[0][1]
            if front_count > count:
                break
            moved += front_count
            count -= front_count
            tops.popleft()

        if not tops:
            tops.append((weight, moved))
            excluded += count
        elif weight - tops[0][0] >= difference:
            if count > 0:
                tops.append((weight, moved + count))
                front_weight, front_count = tops[0]
                tops[0] = (front_weight, front_count - count)
            elif moved:
                tops.append((weight, moved))
        else:
            if moved:
                tops.append((weight, moved))
            excluded += count

    return total - excluded


def max_matching_after_rotation(
    total: int, first: Sequence[int], second: Sequence[int]
) -> int:
    """Most positions that agree after rotating or reversing the second list.

    Both lists hold the same number of values drawn from ``1..total``; values
    missing from both lists count as matched.
    """
    first = list(first)
    second = list(second)
    if len(first) != len(second):
        raise ValueError("both sequences must have the same length")
    length = len(first)
    position = {value: index for index, value in enumerate(first)}

    def best_shift(sequence: list[int]) -> int:
        shifts = Counter(
            (position[value] - index) % length
            for index, value in enumerate(sequence)
            if value in position
        )
        return max(shifts.values(), default=0)

    missing = sum(1 for value in second if value not in position)
    best = max(best_shift(second), best_shift(second[::-1]))
    return best + total - length - missing


class _Tally:
    """Counts shots per target and how many distinct targets are hit."""

    def __init__(self, targets: frozenset[int]) -> None:
        self._targets = targets
        self._counts: Counter[int] = Counter()
        self.distinct = 0

    def add(self, spot: int) -> None:
        if spot in self._targets:
            self._counts[spot] += 1
            if self._counts[spot] == 1:
                self.distinct += 1

    def remove(self, spot: int) -> None:
        if spot in self._targets:
            self._counts[spot] -= 1
            if self._counts[spot] == 0:
                self.distinct -= 1


def max_targets_hit(targets: Iterable[int], commands: str) -> int:
    """Most distinct targets hit after changing at most one command.

    ``commands`` is a string of ``'L'`` (step left), ``'R'`` (step right) and
    ``'F'`` (fire at the current spot); the walk starts at zero.
    """
    bad = set(commands) - set(_MOVES)
    if bad:
        raise ValueError(f"unknown commands: {''.join(sorted(bad))}")
    target_set = frozenset(targets)

    # positions[i] is the spot before command i runs.
    positions = list(accumulate((_MOVES[c] for c in commands), initial=0))

    best = len(
        {spot for command, spot in zip(commands, positions) if command == "F"}
        & target_set
    )

    for changed, shift, fires in _CHANGES:
        tally = _Tally(target_set)
        for command, spot in zip(commands, positions):
            if command == "F":
                tally.add(spot + shift)
        for command, spot in zip(commands, positions):
            if command == "F":
                tally.remove(spot + shift)
            if command == changed:
                if fires:
                    tally.add(spot)
                best = max(best, tally.distinct)
                if fires:
                    tally.remove(spot)
            if command == "F":
                tally.add(spot)

    return best