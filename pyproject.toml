[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "solitaire"
version = "0.1.0"
description = "Klondike solitaire played in the terminal with ASCII-art cards"
requires-python = ">=3.10"
keywords = ["solitaire", "klondike", "patience", "cards", "terminal", "game"]
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
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
klondike = "solitaire.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["solitaire"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
