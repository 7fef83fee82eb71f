[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "stronghold"
version = "0.1.0"
description = "A text-mode kingdom management game with single-player and hot-seat multiplayer modes"
requires-python = ">=3.10"
keywords = ["game", "strategy", "kingdom", "simulation", "text-based", "hot-seat"]
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
    "Topic :: Games/Entertainment :: Simulation",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
stronghold = "stronghold.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["stronghold"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
