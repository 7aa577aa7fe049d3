import math

import pytest

from mazebot.ranges import WorldRanges, heading_from_quaternion, world_ranges


def _yaw_quaternion(yaw):
    return 0.0, 0.0, math.sin(yaw / 2), math.cos(yaw / 2)


def test_identity_quaternion_has_zero_heading():
    assert heading_from_quaternion(0.0, 0.0, 0.0, 1.0) == 0.0


@pytest.mark.parametrize("yaw", [-3.0, -1.2, 0.0, 0.4, 1.5707963, 3.0])
def test_heading_round_trips_pure_yaw(yaw):
    assert heading_from_quaternion(*_yaw_quaternion(yaw)) == pytest.approx(yaw)


def test_facing_north_uses_fixed_indices():
    scan = [float(i) for i in range(360)]
    assert world_ranges(scan, 0.0) == WorldRanges(0.0, 90.0, 180.0, 270.0)


def test_facing_west_rotates_indices():
    scan = [float(i) for i in range(360)]
    result = world_ranges(scan, math.pi / 2)
    assert result == WorldRanges(north=270.0, west=0.0, south=90.0, east=180.0)


@pytest.mark.parametrize("heading", [-3.1, -2.0, -0.7, 0.0, 0.3, 1.9, 3.1])
def test_directions_stay_quarter_turns_apart(heading):
    scan = [float(i) for i in range(360)]
    result = world_ranges(scan, heading)
    assert (result.west - result.north) % 360 == 90
    assert (result.south - result.west) % 360 == 90
    assert (result.east - result.south) % 360 == 90
    assert all(0 <= v < 360 for v in (result.north, result.west, result.south, result.east))


def test_heading_is_truncated_to_whole_degrees():
    scan = [float(i) for i in range(360)]
    assert world_ranges(scan, math.radians(89.9)) == world_ranges(scan, math.radians(89.0))
    assert world_ranges(scan, math.radians(-0.5)) == world_ranges(scan, 0.0)


def test_short_scan_raises_index_error():
    with pytest.raises(IndexError):
        world_ranges([1.0] * 100, 0.0)


def test_empty_scan_raises_index_error():
    with pytest.raises(IndexError):
        world_ranges([], 0.0)