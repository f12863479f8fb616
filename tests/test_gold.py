import random

import pytest

from olympiadsolve.gold import PointCost, count_direct_routes, longest_label_paths


def test_direct_routes_sample():
    assert count_direct_routes(["11", "1"]) == 2


def test_direct_routes_single_pair_difference():
    assert count_direct_routes(["1"]) - count_direct_routes(["0"]) == 1


@pytest.mark.parametrize(
    "rows",
    [
        ["1111", "111", "11", "1"],
        ["1010", "011", "10", "1"],
        ["0000", "000", "00", "0"],
    ],
)
def test_direct_routes_bounded_by_pairs(rows):
    cities = len(rows) + 1
    result = count_direct_routes(rows)
    assert 0 <= result <= cities * (cities - 1) // 2


def test_direct_routes_rejects_wrong_length():
    with pytest.raises(ValueError):
        count_direct_routes(["1", "1"])


def test_direct_routes_rejects_bad_character():
    with pytest.raises(ValueError):
        count_direct_routes(["1x", "1"])


def test_isolated_nodes_have_empty_paths():
    assert longest_label_paths(3, []) == [(0, 0)] * 3


def test_tie_prefers_smaller_label():
    results = longest_label_paths(3, [(1, 2, 9), (1, 3, 4)])
    assert results[0] == (1, 4)


def test_longer_path_beats_heavier_edge():
    results = longest_label_paths(4, [(1, 2, 1), (2, 3, 1), (1, 4, 100)])
    node1, node2 = results[0], results[1]
    assert node1 == (node2[0] + 1, node2[1] + 1)


def test_tie_compares_later_labels():
    edges = [(1, 2, 1), (1, 3, 1), (2, 4, 5), (3, 4, 3)]
    results = longest_label_paths(4, edges)
    node3 = results[2]
    assert results[0] == (node3[0] + 1, node3[1] + 1)


def test_long_chain():
    count = 60
    edges = [(node, node + 1, 1) for node in range(1, count)]
    results = longest_label_paths(count, edges)
    assert results == [(count - node, count - node) for node in range(1, count + 1)]


def test_cycle_is_rejected():
    with pytest.raises(ValueError):
        longest_label_paths(2, [(1, 2, 1), (2, 1, 1)])


def test_unknown_node_is_rejected():
    with pytest.raises(ValueError):
        longest_label_paths(2, [(1, 3, 1)])


def _random_points(seed, count):
    rng = random.Random(seed)
    return [rng.randint(-1000, 1000) for _ in range(count)]


def test_single_point_costs_nothing():
    assert PointCost([42]).query(3, 7) == 0


def test_empty_points_rejected():
    with pytest.raises(ValueError):
        PointCost([])


@pytest.mark.parametrize("costs", [(1, 1), (2, 5), (7, 3)])
def test_order_does_not_matter(costs):
    points = _random_points(1, 120)
    assert PointCost(points).query(*costs) == PointCost(points[::-1]).query(*costs)


@pytest.mark.parametrize("costs", [(1, 1), (2, 5), (7, 3)])
def test_translation_invariance(costs):
    points = _random_points(2, 90)
    shifted = [point + 12345 for point in points]
    assert PointCost(points).query(*costs) == PointCost(shifted).query(*costs)


@pytest.mark.parametrize("costs", [(1, 1), (2, 5), (7, 3)])
def test_scaling_costs_scales_result(costs):
    solver = PointCost(_random_points(3, 150))
    left, right = costs
    assert solver.query(3 * left, 3 * right) == 3 * solver.query(left, right)


@pytest.mark.parametrize("costs", [(2, 5), (9, 1), (4, 6)])
def test_mirror_symmetry(costs):
    points = _random_points(4, 200)
    left, right = costs
    mirrored = [-point for point in points]
    assert PointCost(points).query(left, right) == PointCost(mirrored).query(right, left)


def test_equal_points_cost_nothing():
    assert PointCost([5] * 80).query(2, 9) == PointCost([5]).query(2, 9)