[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "smartcar"
version = "0.1.0"
description = "A terminal smart car simulator with four-motor steering on a grid map"
requires-python = ">=3.10"
dependencies = []
keywords = ["simulator", "car", "robot", "terminal", "grid"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
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

[project.scripts]
smartcar = "smartcar.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["smartcar"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
