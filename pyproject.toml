[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "battleship"
version = "1.0.0"
description = "A terminal Battleship game against a computer opponent, with battleships, fighter jets and submarines."
requires-python = ">=3.10"
dependencies = []
keywords = ["battleship", "game", "terminal", "board game"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
battleship = "battleship.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["battleship"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
