[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minecount"
version = "0.1.0"
description = "Annotate Minesweeper boards with neighbouring mine counts, plus a small doubly linked list"
requires-python = ">=3.10"
dependencies = []
keywords = ["minesweeper", "puzzle", "board", "annotate", "linked-list"]
classifiers = [
    "Development Status :: 3 - Alpha",
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
minecount = "minecount.annotate:main"

[tool.hatch.build.targets.wheel]
packages = ["minecount"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
