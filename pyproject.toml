[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "micemen"
version = "0.1.0"
description = "A two-player terminal puzzle game: shift columns of walls and mice on a wrapping grid"
requires-python = ">=3.10"
keywords = ["game", "terminal", "puzzle", "micemen", "two-player"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Environment :: Console :: Curses",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]
dependencies = [
    "blessed",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
micemen = "micemen.engine:main"

[tool.hatch.build.targets.wheel]
packages = ["micemen"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
