"""Corridor follower: keeps centred between walls, turns at openings, backs out of dead ends."""

from __future__ import annotations

import logging
import math
from enum import Enum
from typing import Callable, Sequence

from mazebot.geometry import Pose2D, Twist, shortest_angular_distance, yaw_from_quaternion
from mazebot.scan import Regions, corridor_regions

log = logging.getLogger(__name__)


class State(Enum):
    """Top-level behaviour of the follower."""

    FORWARD = 0
    TURN_LEFT = 1
    TURN_RIGHT = 2
    GO_BACK = 3


class TurnPhase(Enum):
    """Steps of a 90 degree turn."""

    WAIT_BEFORE_TURN = 0
    DO_TURN = 1
    DETECT_WALLS = 2
    GO_FORWARD_AFTER_TURN = 3


class CorridorFollower:
    """Drives down a corridor from laser scans and odometry, one step at a time."""

    WALL_DIST = 0.5
    TOLERANCE = 0.05
    GO_BACK_DIST = 0.2
    OPEN_SIDE = 0.95
    DETECT_MARGIN = 0.25
    DRIVE_SPEED = 0.1
    MAX_STEER = 0.5
    KP = 1.0
    TURN_SPEED = 0.5236
    SETTLE_TIME = 2.0

    def __init__(self, publish: Callable[[Twist], None] | None = None) -> None:
        self._publish = publish
        self.state = State.FORWARD
        # Until the first scan arrives every sector reads zero.
        self.regions = Regions(0.0, 0.0, 0.0, 0.0, 0.0)
        self.pose = Pose2D()
        self.yaw = 0.0
        self.no_wall_left = False
        self.no_wall_right = False
        self.turn_90 = False
        self.turn_180 = False
        self.initial_yaw = 0.0
        self.turn_phases: dict[State, TurnPhase] = {
            State.TURN_LEFT: TurnPhase.WAIT_BEFORE_TURN,
            State.TURN_RIGHT: TurnPhase.WAIT_BEFORE_TURN,
        }
        self._turn_start: dict[State, float] = {State.TURN_LEFT: 0.0, State.TURN_RIGHT: 0.0}

    def on_odom(self, x: float, y: float, qx: float, qy: float, qz: float, qw: float) -> Pose2D:
        """Record the robot's position and heading from an odometry message."""
        self.yaw = yaw_from_quaternion(qx, qy, qz, qw)
        self.pose = Pose2D(x, y, self.yaw)
        return self.pose

    def on_scan(self, ranges: Sequence[float]) -> Regions:
        """Update the sector distances and note open sides while driving forward."""
        self.regions = corridor_regions(ranges)
        if self.state is State.FORWARD:
            if not self.no_wall_right and self.regions.right >= self.OPEN_SIDE:
                self.no_wall_right = True
            if not self.no_wall_left and self.regions.left >= self.OPEN_SIDE:
                self.no_wall_left = True
        log.info("noWallLeft:%d, noWallRight:%d", self.no_wall_left, self.no_wall_right)
        return self.regions

    def step(self, now: float) -> Twist:
        """Run one control cycle at time ``now`` (seconds) and return the command."""
        if self.state is State.FORWARD:
            move = self._forward()
            if move is None:
                return Twist()
        elif self.state in (State.TURN_LEFT, State.TURN_RIGHT):
            move = self._turn(self.state, now)
        else:
            move = self._go_back()
        if self._publish is not None:
            self._publish(move)
        return move

    def _forward(self) -> Twist | None:
        r = self.regions
        limit = self.WALL_DIST + self.TOLERANCE
        if r.front < self.GO_BACK_DIST and r.left_front < limit and r.right_front < limit:
            self.state = State.GO_BACK
            self.turn_180 = True
            log.info("Dead end detected! Initiating GO_BACK")
            return None
        error = r.left - r.right
        steer = max(-self.MAX_STEER, min(self.MAX_STEER, self.KP * error))
        log.info("Centered driving: error=%f, angular=%f", error, steer)
        return Twist(self.DRIVE_SPEED, steer)

    def _heading_change(self, flag_name: str) -> float:
        if getattr(self, flag_name):
            self.initial_yaw = self.yaw
            setattr(self, flag_name, False)
        return abs(shortest_angular_distance(self.initial_yaw, self.yaw))

    def _turn(self, direction: State, now: float) -> Twist:
        sign = 1.0 if direction is State.TURN_LEFT else -1.0
        phase = self.turn_phases[direction]
        move = Twist()

        if phase is TurnPhase.WAIT_BEFORE_TURN:
            self._turn_start[direction] = now
            self.turn_phases[direction] = TurnPhase.DO_TURN
            log.info("Waiting before turn...")
        elif phase is TurnPhase.DO_TURN:
            if now - self._turn_start[direction] < self.SETTLE_TIME:
                move.linear_x = self.DRIVE_SPEED
            elif self._heading_change("turn_90") < math.pi / 2:
                move.angular_z = sign * self.TURN_SPEED
            else:
                self.turn_phases[direction] = TurnPhase.DETECT_WALLS
                self._turn_start[direction] = now
                log.info("Finished turning. Start going forward...")
        elif phase is TurnPhase.DETECT_WALLS:
            opening = self.WALL_DIST + self.DETECT_MARGIN
            if self.regions.left >= opening or self.regions.right >= opening:
                move.linear_x = self.DRIVE_SPEED
            else:
                self.turn_phases[direction] = TurnPhase.GO_FORWARD_AFTER_TURN
        elif now - self._turn_start[direction] < self.SETTLE_TIME:
            move.linear_x = self.DRIVE_SPEED
        else:
            self.turn_90 = False
            self.state = State.FORWARD
            self.no_wall_right = False
            self.turn_phases[direction] = TurnPhase.WAIT_BEFORE_TURN
            log.info("Done with forward phase after turning.")

        log.info("%s, phase: %s", direction.name, self.turn_phases[direction].name)
        return move

    def _go_back(self) -> Twist:
        move = Twist()
        if self._heading_change("turn_180") < math.pi:
            move.angular_z = -self.TURN_SPEED
        else:
            self.state = State.FORWARD
        log.info("GO_BACK")
        return move