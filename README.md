# mazebot

Navigation logic for a small differential-drive robot that finds its way
through a maze. You feed it laser ranges, odometry and positions, and it
hands back velocity commands and planned paths.

## Modules

- `mazebot.geometry` – the `Twist` (`linear_x`, `angular_z`) and `Pose2D`
  (`x`, `y`, `theta`) value types, `yaw_from_quaternion`, `normalize_angle`
  (maps onto (-pi, pi]) and `shortest_angular_distance`.
- `mazebot.scan` – windowed statistics over a laser scan whose index is the
  beam angle in degrees. `window_min` and `window_avg` look at the readings
  from `mid - offset` to `mid + offset`, skipping NaN, infinite and zero
  values; `window_min` gives infinity and `window_avg` gives NaN when nothing
  usable is left, and a window that falls outside the scan raises
  `IndexError`. `corridor_regions` sums up a 360-beam scan as a `Regions`
  record with the fields `right_front`, `front`, `left_front`, `right` and
  `left`.
- `mazebot.wall_follow` – `WallFollower`, a reactive right-hand wall
  follower that reads the beams at 270, 300 and 330 degrees. Unusable beams
  are treated as 10 m away by `safe_range`.
- `mazebot.corridor` – `CorridorFollower`, a state machine (`State`,
  `TurnPhase`) for driving down corridors.
- `mazebot.planner` – A* search over a greyscale map image (`a_star`,
  `is_free`, `neighbors`, `heuristic`), loading a map from a map YAML file
  (`load_map`, returning a `GridMap`), conversion from world to pixel
  coordinates, rendering of a found path (`render_path`) and the
  `mazebot-plan` command.

## Installing

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Planning a path on a map

A map is described by a YAML file:

```yaml
image: maze.png
resolution: 0.05
origin: [-10.0, -10.0, 0.0]
```

The image is read as greyscale; pixels brighter than 200 are free, everything
else is a wall. Search is 8-connected with Euclidean step costs. From Python:

```python
from mazebot.planner import load_map, render_path

grid_map = load_map("maze.yaml")
start = grid_map.world_to_pixel(0.5, 1.2)
path = grid_map.plan_to(0.5, 1.2, (150, 150))
image = render_path(grid_map.image, path, start, (150, 150))
```

`a_star` raises `PathNotFound` when the goal cannot be reached, and
`load_map` raises `OSError` when the image cannot be read. `plan_to` uses
the pixel `(150, 150)` as its goal when none is given. `render_path` returns
a copy of the image with the path in grey (128) and a filled white circle of
radius 3 around the start and the goal.

From the command line:

```
mazebot-plan X Y [--map mapa.yaml] [--goal PX PY] [--output /tmp/robot_path.png]
```

The command loads the map (default `mapa.yaml`), converts the world position
`X Y` to a pixel, plans to the goal pixel (default `150 150`) and writes the
drawn path to the output image (default `/tmp/robot_path.png`). It exits
with status 1 if the map cannot be loaded or no path is found.

## Following a wall

```python
from mazebot.wall_follow import WallFollower

follower = WallFollower(publish=print)   # publish is optional
twist = follower.on_scan(ranges)          # ranges: 360 floats, index = degrees
```

If the right wall is farther than 0.3 m the robot curves right; if something
is closer than 0.25 m ahead-right it turns left on the spot; otherwise it
steers left or right to keep the 300-degree beam at the length expected
from the right-hand distance.

## Corridor driving

```python
from mazebot.corridor import CorridorFollower

robot = CorridorFollower()
robot.on_odom(x, y, qx, qy, qz, qw)
robot.on_scan(ranges)
command = robot.step(now)                 # now: time in seconds
```

In `State.FORWARD` the robot drives at 0.1 m/s and steers by the difference
between the left and right distances, clamped to ±0.5 rad/s. When the front
is closer than 0.2 m and both diagonal sectors are closer than 0.55 m it
switches to `State.GO_BACK` and turns clockwise until its heading has changed
by pi, then drives forward again. While driving forward, `on_scan` sets
`no_wall_left` / `no_wall_right` when a side reads 0.95 m or more.

`State.TURN_LEFT` and `State.TURN_RIGHT` run a 90-degree turn through the
`TurnPhase` steps (wait, drive on for 2 s and turn, drive until both sides
are close again, drive on for 2 s), but forward driving never enters them by
itself: set `robot.state` and `robot.turn_90 = True` to start a turn.

## What it does not do

The package does not talk to a robot. There is no message transport, no
subscription to scan, odometry or pose topics, and no control loop that calls
`step` at a fixed rate; your own code has to supply the data and send the
returned `Twist` on. Likewise `mazebot-plan` plans once from a position
given on the command line rather than re-planning whenever a new pose
arrives.