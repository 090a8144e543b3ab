[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lightsgrid"
version = "0.0.1"
description = "A Lights Out style terminal puzzle and an animated half-block canvas, with small numeric helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["puzzle", "lights-out", "terminal", "game", "bitmap", "animation", "curses"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Environment :: Console :: Curses",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
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
lightsgrid = "lightsgrid.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["lightsgrid"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]
