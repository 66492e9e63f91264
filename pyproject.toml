[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "darkjaghou"
version = "0.1.0"
description = "Terminal labyrinth game: find the princess before Dark Jaghou finds you"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "labyrinth", "maze", "terminal", "puzzle"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Environment :: Console",
    "Operating System :: POSIX",
    "Intended Audience :: End Users/Desktop",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
darkjaghou = "darkjaghou.menu:main"

[tool.setuptools.packages.find]
include = ["darkjaghou*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
