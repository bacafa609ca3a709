"""A* path planning on an occupancy image loaded from a map description."""

from __future__ import annotations

import argparse
import heapq
import itertools
import math
import sys
from dataclasses import dataclass
from typing import Sequence

import numpy as np
import yaml
from PIL import Image

Point = tuple[int, int]

ENTRANCE: Point = (150, 150)
DEFAULT_MAP = "mapa.yaml"
DEFAULT_OUTPUT = "/tmp/robot_path.png"
FREE_THRESHOLD = 200
PATH_VALUE = 128
MARK_VALUE = 255
MARK_RADIUS = 3


class PathNotFound(Exception):
    """Raised when the goal cannot be reached from the start."""


def is_free(grid: np.ndarray, x: int, y: int) -> bool:
    """True if ``(x, y)`` lies on the grid and its cell is bright enough to drive on."""
    rows, cols = grid.shape[:2]
    return 0 <= x < cols and 0 <= y < rows and int(grid[y, x]) > FREE_THRESHOLD


def neighbors(point: Point) -> list[Point]:
    """The eight cells around ``point``: the four straight ones first."""
    x, y = point
    return [
        (x + 1, y), (x - 1, y), (x, y + 1), (x, y - 1),
        (x + 1, y + 1), (x - 1, y - 1), (x - 1, y + 1), (x + 1, y - 1),
    ]


def heuristic(a: Point, b: Point) -> float:
    """Euclidean distance between two cells."""
    return math.hypot(a[0] - b[0], a[1] - b[1])


def a_star(grid: np.ndarray, start: Point, goal: Point) -> list[Point]:
    """Shortest 8-connected path from ``start`` to ``goal`` through free cells."""
    start = (int(start[0]), int(start[1]))
    goal = (int(goal[0]), int(goal[1]))
    order = itertools.count()
    best_g: dict[Point, float] = {start: 0.0}
    parents: dict[Point, Point | None] = {start: None}
    frontier = [(heuristic(start, goal), next(order), 0.0, start)]

    while frontier:
        _, _, g, current = heapq.heappop(frontier)
        if g > best_g[current]:
            continue
        if current == goal:
            path = []
            node: Point | None = current
            while node is not None:
                path.append(node)
                node = parents[node]
            path.reverse()
            return path
        for nxt in neighbors(current):
            if not is_free(grid, *nxt):
                continue
            cost = g + heuristic(current, nxt)
            if nxt not in best_g or cost < best_g[nxt]:
                best_g[nxt] = cost
                parents[nxt] = current
                heapq.heappush(frontier, (cost + heuristic(nxt, goal), next(order), cost, nxt))

    raise PathNotFound(f"no path from {start} to {goal}")


@dataclass
class GridMap:
    """Grey-scale occupancy image with its placement in world coordinates."""

    image: np.ndarray
    resolution: float = 0.05
    origin_x: float = 0.0
    origin_y: float = 0.0

    @property
    def width(self) -> int:
        return int(self.image.shape[1])

    @property
    def height(self) -> int:
        return int(self.image.shape[0])

    def world_to_pixel(self, x: float, y: float) -> Point:
        """Pixel holding the world point; image rows grow downwards."""
        px = int((x - self.origin_x) / self.resolution)
        py = int(self.height - (y - self.origin_y) / self.resolution)
        return px, py

    def plan_to(self, x: float, y: float, goal: Point = ENTRANCE) -> list[Point]:
        """Plan from the world position ``(x, y)`` to the pixel ``goal``."""
        return a_star(self.image, self.world_to_pixel(x, y), goal)


def load_map(yaml_path: str) -> GridMap:
    """Read a map description and the grey-scale image it names."""
    with open(yaml_path, encoding="utf-8") as fh:
        description = yaml.safe_load(fh)
    image_file = str(description["image"])
    resolution = float(description["resolution"])
    origin = description["origin"]
    try:
        with Image.open(image_file) as img:
            image = np.array(img.convert("L"), dtype=np.uint8)
    except OSError as exc:
        raise OSError(f"Failed to load map image: {image_file}") from exc
    if image.size == 0:
        raise OSError(f"Failed to load map image: {image_file}")
    return GridMap(image, resolution, float(origin[0]), float(origin[1]))


def _fill_circle(image: np.ndarray, centre: Point, radius: int, value: int) -> None:
    rows, cols = image.shape[:2]
    ys, xs = np.ogrid[:rows, :cols]
    mask = (xs - centre[0]) ** 2 + (ys - centre[1]) ** 2 <= radius * radius
    image[mask] = value


def render_path(
    grid: np.ndarray, path: Sequence[Point], start: Point, goal: Point
) -> np.ndarray:
    """Copy of ``grid`` with the path drawn grey and the endpoints marked white."""
    out = np.array(grid, dtype=np.uint8, copy=True)
    rows, cols = out.shape[:2]
    for x, y in path:
        if 0 <= x < cols and 0 <= y < rows:
            out[y, x] = PATH_VALUE
    for centre in (start, goal):
        _fill_circle(out, centre, MARK_RADIUS, MARK_VALUE)
    return out


def main(argv: Sequence[str] | None = None) -> int:
    """Plan from a robot position to the entrance and save the drawn path."""
    parser = argparse.ArgumentParser(
        prog="mazebot-plan",
        description="Plan a path on a map from a robot position to the entrance.",
    )
    parser.add_argument("x", type=float, help="robot x in world coordinates")
    parser.add_argument("y", type=float, help="robot y in world coordinates")
    parser.add_argument("--map", default=DEFAULT_MAP, help="map description file")
    parser.add_argument(
        "--goal", nargs=2, type=int, default=list(ENTRANCE), metavar=("PX", "PY"),
        help="goal pixel",
    )
    parser.add_argument("--output", default=DEFAULT_OUTPUT, help="image to write")
    args = parser.parse_args(argv)

    try:
        grid_map = load_map(args.map)
    except OSError as exc:
        print(f"Failed to load map: {exc}", file=sys.stderr)
        return 1
    print(f"Map loaded: {grid_map.width}x{grid_map.height}")

    start = grid_map.world_to_pixel(args.x, args.y)
    goal = (args.goal[0], args.goal[1])
    print(f"Robot pose (px): [{start[0]}, {start[1]}]")

    try:
        path = a_star(grid_map.image, start, goal)
    except PathNotFound:
        print("No path found!", file=sys.stderr)
        return 1

    Image.fromarray(render_path(grid_map.image, path, start, goal)).save(args.output)
    print(f"Saved path to {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())