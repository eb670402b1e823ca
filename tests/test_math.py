from wayfarer.utils.math import STAT_MAX, clamp, saturating_add, saturating_sub


def test_clamp_bounds():
    assert clamp(5, 0, 10) == 5
    assert clamp(-3, 0, 10) == 0
    assert clamp(42, 0, 10) == 10


def test_saturating_sub_stops_at_floor():
    assert saturating_sub(3, 2) == 1
    assert saturating_sub(1, 2) == 0
    assert saturating_sub(0, 65535) == 0
    assert saturating_sub(5, 10, floor=2) == 2


def test_saturating_add_stops_at_ceiling():
    assert saturating_add(10, 5) == 15
    assert saturating_add(STAT_MAX - 1, 10) == STAT_MAX
    assert saturating_add(STAT_MAX, STAT_MAX) == STAT_MAX
    assert saturating_add(8, 5, ceiling=10) == 10
