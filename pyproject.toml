[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "adventgrid"
version = "0.1.0"
description = "Solvers for a season of grid, parsing and search puzzles"
requires-python = ">=3.10"
dependencies = []
keywords = ["puzzles", "advent", "grid", "search", "simulation"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
adventgrid-day03 = "adventgrid.day03:main"
adventgrid-day04 = "adventgrid.day04:main"
adventgrid-day05 = "adventgrid.day05:main"
adventgrid-day06 = "adventgrid.day06:main"
adventgrid-day07 = "adventgrid.day07:main"
adventgrid-day08 = "adventgrid.day08:main"
adventgrid-day09 = "adventgrid.day09:main"
adventgrid-day10 = "adventgrid.day10:main"
adventgrid-day11 = "adventgrid.day11:main"
adventgrid-day12 = "adventgrid.day12:main"
adventgrid-day13 = "adventgrid.day13:main"
adventgrid-day14 = "adventgrid.day14:main"
adventgrid-day15 = "adventgrid.day15:main"
adventgrid-day16 = "adventgrid.day16:main"
adventgrid-day18 = "adventgrid.day18:main"

[tool.hatch.build.targets.wheel]
packages = ["adventgrid"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
