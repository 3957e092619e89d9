[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "estacion"
version = "0.1.0"
description = "A grid puzzle game: guide a robot through a space station's tanks, doors and walls, or watch an A* bot solve it."
requires-python = ">=3.10"
keywords = ["game", "puzzle", "maze", "pathfinding", "a-star", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Environment :: MacOS X",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Spanish",
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
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
estacion = "estacion.game:main"

[tool.hatch.build.targets.wheel]
packages = ["estacion"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
