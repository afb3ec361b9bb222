[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algokata"
version = "0.1.0"
description = "Solutions to classic programming challenges: strings, arrays, number puzzles, trees, linked lists and sudoku."
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "puzzles", "katas", "interview", "data-structures"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
mex-tree = "algokata.mex_tree:main"

[tool.hatch.build.targets.wheel]
packages = ["algokata"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
