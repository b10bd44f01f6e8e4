[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "slingsim"
version = "0.1.0"
description = "A small 2D rigid-body simulation with building blocks for a slingshot-and-targets game"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["physics", "simulation", "game", "2d", "collision", "slingshot"]
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
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["slingsim"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
