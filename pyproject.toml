[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wfengine"
version = "0.1.0"
description = "Game engine building blocks: vector maths, colours, noise, splines, procedural meshes and terrain, timers, events, entities and input state."
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["game", "engine", "ecs", "noise", "terrain", "mesh", "geometry", "timer", "input"]
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
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["wfengine"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
