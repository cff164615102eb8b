[build-system]
requires = ["setuptools>=61.0"]
build-backend = "setuptools.build_meta"

[project]
name = "alienwar"
version = "0.1.0"
description = "Building blocks for a simulation of an Earth army fighting an alien army: containers, units and armies."
requires-python = ">=3.10"
dependencies = []
keywords = ["simulation", "game", "war", "aliens", "queues", "stacks"]
classifiers = [
    "Development Status :: 3 - Alpha",
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
test = ["pytest"]

[tool.setuptools.packages.find]
include = ["alienwar*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
