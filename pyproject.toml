[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "keepwarden"
version = "0.1.0"
description = "Game-logic core for a castle-defence strategy game: timers, tweens, state machines, warriors and territory."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "strategy", "tween", "timer", "state-machine", "tower-defense", "animation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Real Time Strategy",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.setuptools.packages.find]
include = ["keepwarden*"]

[tool.pytest.ini_options]
addopts = "-ra"
