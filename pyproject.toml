[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "structalgo"
version = "0.1.0"
description = "Classic data-structure and algorithm exercises: polynomials, ordered lists, a binary search tree text index, determinants and small console programs"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "data-structures",
    "binary-search-tree",
    "polynomial",
    "determinant",
    "text-index",
    "hangman",
    "education",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Environment :: Console",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
structalgo-determinant = "structalgo.numerics:main"
structalgo-hangman = "structalgo.hangman:main"
structalgo-voting = "structalgo.voting_cli:main"
structalgo-index = "structalgo.index_cli:main"

[tool.hatch.build.targets.wheel]
packages = ["structalgo"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
