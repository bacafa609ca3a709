[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mazebot"
version = "0.1.0"
description = "Maze navigation for a differential-drive robot: corridor and wall following from laser scans, and A* path planning on occupancy map images"
requires-python = ">=3.10"
keywords = ["robotics", "maze", "wall-following", "a-star", "path-planning", "laser-scan", "occupancy-grid"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]
dependencies = [
    "numpy",
    "pillow",
    "pyyaml",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
mazebot-plan = "mazebot.planner:main"

[tool.hatch.build.targets.wheel]
packages = ["mazebot"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
