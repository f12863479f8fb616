import pytest

from olympiadsolve.bronze import (
    can_paint,
    count_fed_days,
    rotate_stamp,
    subscription_cost,
)


def test_fed_days_single_early_delivery():
    assert count_fed_days([(1, 2)], 5) == 2


def test_fed_days_delivery_on_target_day():
    assert count_fed_days([(1, 2), (5, 10)], 5) == 3


def test_fed_days_plenty_of_hay_feeds_every_day():
    target = 40
    assert count_fed_days([(1, 1000)], target) == target


@pytest.mark.parametrize(
    "deliveries, target",
    [
        ([(1, 3), (10, 2)], 20),
        ([(2, 7), (4, 1), (9, 30)], 12),
        ([(1, 100), (3, 100)], 3),
    ],
)
def test_fed_days_never_exceeds_target(deliveries, target):
    result = count_fed_days(deliveries, target)
    assert 0 <= result <= target


def test_fed_days_more_hay_never_hurts():
    small = count_fed_days([(1, 2), (8, 3)], 15)
    large = count_fed_days([(1, 6), (8, 3)], 15)
    assert large >= small


def test_fed_days_requires_deliveries():
    with pytest.raises(ValueError):
        count_fed_days([], 5)


def test_rotate_four_times_is_identity():
    stamp = ["*..", "**.", "..*"]
    rotated = stamp
    for _ in range(4):
        rotated = rotate_stamp(rotated)
    assert rotated == stamp


def test_rotate_twice_is_half_turn():
    stamp = ["*..", "**.", "..*"]
    half = rotate_stamp(rotate_stamp(stamp))
    assert half == [row[::-1] for row in reversed(stamp)]


def test_rotate_rejects_non_square():
    with pytest.raises(ValueError):
        rotate_stamp(["**", "*"])


def test_blank_canvas_is_paintable():
    assert can_paint(["...", "...", "..."], ["*."[:1] + ".", ".."]) is True


def test_canvas_equal_to_stamp_is_paintable():
    stamp = ["*.", "**"]
    assert can_paint(stamp, stamp) is True


def test_canvas_made_from_rotated_stamp():
    stamp = ["*..", "**.", "..."]
    canvas = rotate_stamp(stamp)
    assert can_paint(canvas, stamp) is True


def test_single_cell_stamp_fills_full_canvas():
    assert can_paint(["***", "***", "***"], ["*"]) is True


def test_blank_stamp_cannot_paint_ink():
    assert can_paint(["*.", ".."], ["."]) is False


def test_stamp_larger_than_canvas_cannot_paint():
    assert can_paint(["*"], ["**", "**"]) is False


def test_can_paint_rejects_non_square_canvas():
    with pytest.raises(ValueError):
        can_paint(["**", "**", "**"], ["*"])


def test_subscription_sample():
    assert subscription_cost([7, 9], 4) == 7


def test_subscription_single_day_costs_one_block():
    assert subscription_cost([5], 3) == 3 + 1


def test_subscription_far_apart_days_each_pay_a_block():
    days = [1, 100, 200, 300]
    max_gap = 4
    assert subscription_cost(days, max_gap) == len(days) * (max_gap + 1)


def test_subscription_consecutive_days():
    days = list(range(10, 30))
    max_gap = 2
    assert subscription_cost(days, max_gap) == (max_gap + 1) + (len(days) - 1)