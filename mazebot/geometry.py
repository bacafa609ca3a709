"""Planar motion primitives and angle helpers."""

from __future__ import annotations

import math
from dataclasses import dataclass

_TWO_PI = 2.0 * math.pi


@dataclass
class Twist:
    """Velocity command for a differential-drive base."""

    linear_x: float = 0.0
    angular_z: float = 0.0


@dataclass
class Pose2D:
    """Position and heading in the plane."""

    x: float = 0.0
    y: float = 0.0
    theta: float = 0.0


def yaw_from_quaternion(x: float, y: float, z: float, w: float) -> float:
    """Return the rotation about the z axis encoded by a quaternion."""
    return math.atan2(2.0 * (w * z + x * y), w * w + x * x - y * y - z * z)


def normalize_angle(angle: float) -> float:
    """Map an angle onto the interval (-pi, pi]."""
    positive = math.fmod(math.fmod(angle, _TWO_PI) + _TWO_PI, _TWO_PI)
    if positive > math.pi:
        positive -= _TWO_PI
    return positive


def shortest_angular_distance(start: float, end: float) -> float:
    """Signed smallest rotation that takes ``start`` to ``end``."""
    return normalize_angle(end - start)