import math

import pytest

from mazebot.geometry import Twist
from mazebot.wall_follow import WallFollower, safe_range


def _scan(right=1.0, right_front=1.0, front_right=1.0):
    ranges = [1.0] * 360
    ranges[270] = right
    ranges[300] = right_front
    ranges[330] = front_right
    return ranges


@pytest.mark.parametrize("bad", [math.nan, math.inf, -math.inf, 0.0])
def test_safe_range_replaces_unusable_readings(bad):
    assert safe_range([bad], 0) == 10.0


def test_safe_range_keeps_good_reading():
    assert safe_range([0.2, 0.7], 1) == 0.7


def test_no_wall_on_right_curves_right():
    move = WallFollower().on_scan(_scan(right=10.0))
    assert move == Twist(0.05, -0.22)


def test_invalid_right_beam_counts_as_no_wall():
    move = WallFollower().on_scan(_scan(right=math.nan))
    assert move == Twist(0.05, -0.22)


def test_obstacle_in_front_turns_left_in_place():
    move = WallFollower().on_scan(_scan(right=0.2, front_right=0.1))
    assert move == Twist(0.0, 0.5)


def test_close_to_wall_steers_left():
    move = WallFollower().on_scan(_scan(right=0.2, right_front=0.1))
    assert move == Twist(0.05, 0.28)


def test_far_from_wall_steers_right():
    move = WallFollower().on_scan(_scan(right=0.2, right_front=1.0))
    assert move == Twist(0.05, -0.28)


def test_command_is_published():
    sent = []
    follower = WallFollower(publish=sent.append)
    move = follower.on_scan(_scan(right=0.2, right_front=1.0))
    assert sent == [move]
    assert sent[0].angular_z < 0