[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "adventkit"
version = "0.11.0"
description = "Scaffold, run, benchmark and submit Advent of Code solutions from the command line."
requires-python = ">=3.10"
dependencies = []
keywords = ["advent-of-code", "puzzles", "benchmark", "scaffolding", "cli"]
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
    "Topic :: Software Development :: Build Tools",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
adventkit = "adventkit.cli:main"
adventkit-day01 = "adventkit.day01:main"

[tool.hatch.build.targets.wheel]
packages = ["adventkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
