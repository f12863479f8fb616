"""Gold-division solvers: route parities, labelled longest paths, point costs."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import accumulate, pairwise
from typing import NamedTuple

_TAIL_LIMIT = 50
_SEARCH_WINDOW = 50


def count_direct_routes(parity_rows: Sequence[str]) -> int:
    """Count the direct routes implied by the route-parity table.

    Row ``i`` gives, for each later city ``j``, the parity of the number of
    routes from city ``i`` to city ``j`` as ``'0'`` or ``'1'``.
    """
    city_count = len(parity_rows) + 1
    for index, row in enumerate(parity_rows):
        if len(row) != city_count - 1 - index:
            raise ValueError(f"row {index} has the wrong length")
        if set(row) - {"0", "1"}:
            raise ValueError(f"row {index} may hold only '0' and '1'")

    reach = [[0] * city_count for _ in range(city_count)]
    direct = 0
    for origin in range(city_count - 2, -1, -1):
        parity = [0] * city_count
        row = parity_rows[origin]
        for target in range(origin + 1, city_count):
            wanted = int(row[target - origin - 1])
            if parity[target] != wanted:
                direct += 1
                parity[target] ^= 1
                via = reach[target]
                for beyond in range(origin + 2, city_count):
                    parity[beyond] ^= via[beyond]
        reach[origin] = parity
    return direct


class _Route(NamedTuple):
    length: int
    total: int
    tail: list[int]


def _best_route(
    neighbours: list[tuple[int, int]], known: dict[int, _Route]
) -> _Route:
    best = _Route(0, 0, [])
    for child, label in neighbours:
        below = known[child]
        tail = (below.tail + [label])[:_TAIL_LIMIT]
        candidate = _Route(below.length + 1, below.total + label, tail)
        if candidate.length > best.length:
            best = candidate
        elif candidate.length == best.length and tail[::-1] < best.tail[::-1]:
            best = candidate
    return best


def longest_label_paths(
    node_count: int, edges: Iterable[tuple[int, int, int]]
) -> list[tuple[int, int]]:
    """For each node, the longest path's length and its label sum.

    Ties in length go to the path whose label sequence is smallest.
    Nodes are numbered from 1; the graph must be acyclic.
    """
    adjacency: list[list[tuple[int, int]]] = [[] for _ in range(node_count + 1)]
    for start, end, label in edges:
        if not (1 <= start <= node_count and 1 <= end <= node_count):
            raise ValueError(f"edge ({start}, {end}) names an unknown node")
        adjacency[start].append((end, label))

    known: dict[int, _Route] = {}
    active: set[int] = set()
    for root in range(1, node_count + 1):
        if root in known:
            continue
        active.add(root)
        stack = [(root, iter(adjacency[root]))]
        while stack:
            node, pending = stack[-1]
            for child, _ in pending:
                if child in known:
                    continue
                if child in active:
                    raise ValueError("the graph has a cycle")
                active.add(child)
                stack.append((child, iter(adjacency[child])))
                break
            else:
                stack.pop()
                active.discard(node)
                known[node] = _best_route(adjacency[node], known)

    return [
        (known[node].length, known[node].total) for node in range(1, node_count + 1)
    ]


class PointCost:
    """Answers cheapest gathering-point queries over a fixed set of points."""

    def __init__(self, points: Iterable[int]) -> None:
        ordered = sorted(points)
        if not ordered:
            raise ValueError("at least one point is required")
        gaps = [later - earlier for earlier, later in pairwise(ordered)]
        self._left = list(
            accumulate(
                (weight * gap for weight, gap in enumerate(gaps, start=1)), initial=0
            )
        )
        self._right = list(
            accumulate(
                (weight * gap for weight, gap in enumerate(reversed(gaps), start=1)),
                initial=0,
            )
        )[::-1]

    def _cost(self, index: int, left_cost: int, right_cost: int) -> int:
        return self._left[index] * left_cost + self._right[index] * right_cost

    def query(self, left_cost: int, right_cost: int) -> int:
        """Minimum total cost of gathering every point at one of the points."""
        count = len(self._left)
        if left_cost == right_cost:
            middle = count // 2
            candidates = range(max(middle - 1, 0), middle + 1)
        else:
            low, high = 0, count - 1
            while high - low > _SEARCH_WINDOW:
                first = (high - low) // 3 + low
                second = 2 * (high - low) // 3 + low
                if self._cost(first, left_cost, right_cost) < self._cost(
                    second, left_cost, right_cost
                ):
                    high = second - 1
                else:
                    low = first
            candidates = range(low, high + 1)
        return min(self._cost(index, left_cost, right_cost) for index in candidates)