import math

import pytest

from mazebot.scan import Regions, corridor_regions, window_avg, window_min


def _scan(value=1.0):
    return [value] * 360


def test_window_min_picks_smallest():
    ranges = _scan()
    ranges[272] = 0.3
    assert window_min(ranges, 270, 5) == pytest.approx(0.3)


def test_window_min_ignores_zero_nan_and_inf():
    ranges = _scan()
    ranges[268] = 0.0
    ranges[269] = math.nan
    ranges[270] = math.inf
    ranges[271] = 0.8
    assert window_min(ranges, 270, 5) == pytest.approx(0.8)


def test_window_min_without_valid_readings_is_infinite():
    ranges = _scan(math.inf)
    ranges[0] = 0.0
    assert window_min(ranges, 5, 5) == math.inf


def test_window_min_bounds_are_inclusive():
    ranges = _scan()
    ranges[265] = 0.2
    assert window_min(ranges, 270, 5) == pytest.approx(0.2)
    assert window_min(ranges, 270, 4) == pytest.approx(1.0)


def test_window_avg_of_values():
    ranges = _scan()
    ranges[9], ranges[10], ranges[11] = 1.0, 2.0, 3.0
    assert window_avg(ranges, 10, 1) == pytest.approx(2.0)


def test_window_avg_skips_invalid_readings():
    ranges = _scan()
    ranges[9], ranges[10], ranges[11] = 0.0, 2.0, math.nan
    assert window_avg(ranges, 10, 1) == pytest.approx(2.0)


def test_window_avg_without_valid_readings_is_nan():
    ranges = _scan(0.0)
    result = window_avg(ranges, 90, 5)
    assert result == pytest.approx(math.nan, nan_ok=True)


def test_window_avg_truncates_fractional_centre():
    # The 45-degree sector is requested as (22.5, 22.5): beams 0..44.
    ranges = _scan(5.0)
    for i in range(45):
        ranges[i] = 0.5
    assert window_avg(ranges, 22.5, 22.5) == pytest.approx(0.5)


def test_window_outside_scan_raises():
    with pytest.raises(IndexError):
        window_min([1.0] * 10, 8, 5)
    with pytest.raises(IndexError):
        window_avg([1.0] * 10, 2, 5)


def test_corridor_regions_uniform_scan():
    regions = corridor_regions(_scan(0.7))
    assert regions == Regions(0.7, 0.7, 0.7, 0.7, 0.7)


def test_corridor_front_covers_both_sides_of_zero():
    ranges = _scan()
    ranges[350] = 0.1
    assert corridor_regions(ranges).front == pytest.approx(0.1)
    ranges = _scan()
    ranges[55] = 0.15
    assert corridor_regions(ranges).front == pytest.approx(0.15)


def test_corridor_side_sectors():
    ranges = _scan()
    ranges[205] = 0.2
    regions = corridor_regions(ranges)
    assert regions.right_front == pytest.approx(0.2)
    assert regions.right == pytest.approx(1.0)
    ranges[280] = 0.4
    regions = corridor_regions(ranges)
    assert regions.right == pytest.approx(0.4)
    assert regions.left == pytest.approx(1.0)


def test_corridor_left_sectors():
    ranges = _scan()
    ranges[100] = 0.3
    regions = corridor_regions(ranges)
    assert regions.left == pytest.approx(0.3)
    assert regions.left_front == pytest.approx(0.3)
    assert regions.right_front == pytest.approx(1.0)