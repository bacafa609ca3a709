"""Right-hand wall follower driven by three laser beams."""

from __future__ import annotations

import logging
import math
from typing import Callable, Sequence

from mazebot.geometry import Twist

log = logging.getLogger(__name__)

FAR_AWAY = 10.0


def safe_range(ranges: Sequence[float], index: int) -> float:
    """Reading at ``index``, with NaN, infinity and zero replaced by a large distance."""
    value = ranges[index]
    if math.isnan(value) or math.isinf(value) or value == 0.0:
        return FAR_AWAY
    return value


class WallFollower:
    """Keeps a wall on the right-hand side by steering towards or away from it."""

    FRONT_THRESHOLD = 0.25
    WALL_THRESHOLD = 0.3
    OFFSET = 0.01
    BEAM_ANGLE = math.radians(300 - 270)

    def __init__(self, publish: Callable[[Twist], None] | None = None) -> None:
        self._publish = publish

    def on_scan(self, ranges: Sequence[float]) -> Twist:
        """Choose a velocity command for one scan and publish it."""
        front_right = safe_range(ranges, 330)
        right_front = safe_range(ranges, 300)
        right = safe_range(ranges, 270)
        expected = right / math.cos(self.BEAM_ANGLE) + self.OFFSET

        move = Twist()
        if right > self.WALL_THRESHOLD:
            log.info("wall lost on the right, curving right")
            move.linear_x, move.angular_z = 0.05, -0.22
        elif front_right < self.FRONT_THRESHOLD:
            log.info("obstacle ahead on the right, turning left")
            move.angular_z = 0.5
        elif right_front < expected:
            log.info("too close to the wall, steering left")
            move.linear_x, move.angular_z = 0.05, 0.28
        elif right_front > expected:
            log.info("drifting from the wall, steering right")
            move.linear_x, move.angular_z = 0.05, -0.28

        if self._publish is not None:
            self._publish(move)
        return move