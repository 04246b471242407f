[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "advent25"
version = "0.1.0"
description = "Solvers for nine days of holiday programming puzzles, with a command-line runner."
requires-python = ">=3.10"
dependencies = [
    "shapely",
]
keywords = ["puzzles", "advent", "solutions", "algorithms"]
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
test = [
    "pytest",
]

[project.scripts]
advent25 = "advent25.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["advent25"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
