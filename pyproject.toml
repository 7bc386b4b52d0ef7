[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aocpuzzles"
version = "0.1.0"
description = "Advent of Code puzzle solutions with a small toolkit to fetch, scaffold and time them."
requires-python = ">=3.10"
dependencies = []
keywords = ["advent-of-code", "puzzles", "aoc", "solutions"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
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
aoc-download = "aocpuzzles.aoc_cli:download_main"
aoc-read = "aocpuzzles.aoc_cli:read_main"
aoc-run-all = "aocpuzzles.run_all:main"
aoc-scaffold = "aocpuzzles.scaffold:main"

[tool.hatch.build.targets.wheel]
packages = ["aocpuzzles"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
