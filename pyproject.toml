[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "roachrace"
version = "0.1.0"
description = "A console cockroach racing game with player bets, a shared pot and persistent race statistics."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "racing", "betting", "simulation", "console"]
classifiers = [
    "Development Status :: 3 - Alpha",
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

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
roachrace = "roachrace.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["roachrace"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
