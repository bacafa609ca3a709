"""Summaries of laser-scan sectors."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence


def _valid_readings(ranges: Sequence[float], mid: float, offset: float) -> list[float]:
    """Finite non-zero readings from ``mid - offset`` to ``mid + offset`` inclusive."""
    centre, half = int(mid), int(offset)
    low, high = centre - half, centre + half
    if low < 0 or high >= len(ranges):
        raise IndexError(
            f"window {low}..{high} does not fit a scan of {len(ranges)} readings"
        )
    return [r for r in ranges[low : high + 1] if math.isfinite(r) and r != 0]


def window_min(ranges: Sequence[float], mid: float, offset: float) -> float:
    """Smallest usable reading in the window, or infinity if there is none."""
    return min(_valid_readings(ranges, mid, offset), default=math.inf)


def window_avg(ranges: Sequence[float], mid: float, offset: float) -> float:
    """Mean of the usable readings in the window, or NaN if there is none."""
    readings = _valid_readings(ranges, mid, offset)
    if not readings:
        return math.nan
    return sum(readings) / len(readings)


@dataclass(frozen=True)
class Regions:
    """Nearest obstacle distance in each sector around the robot."""

    right_front: float
    front: float
    left_front: float
    right: float
    left: float


def corridor_regions(ranges: Sequence[float]) -> Regions:
    """Split a 360-beam scan into the sectors used for corridor driving."""
    return Regions(
        right_front=window_min(ranges, 270, 70),
        front=min(window_min(ranges, 30, 30), window_min(ranges, 329, 30)),
        left_front=window_min(ranges, 90, 70),
        right=window_min(ranges, 270, 15),
        left=window_min(ranges, 90, 15),
    )