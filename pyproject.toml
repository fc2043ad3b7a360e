[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "chrust"
version = "0.2.0"
description = "A simple chess engine with a minimax AI, playable in the terminal or through a small web API"
requires-python = ">=3.10"
keywords = ["chess", "minimax", "alpha-beta", "fen", "game"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Environment :: Web Environment",
    "Framework :: Flask",
    "Intended Audience :: End Users/Desktop",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]
dependencies = [
    "flask",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
chrust = "chrust.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["chrust"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
