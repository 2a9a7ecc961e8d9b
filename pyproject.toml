[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "enginebravo"
version = "0.1.0"
description = "Core pieces of a 2D game engine: vector geometry, sprite sheets, physics body data, viewport mapping and JSON save games."
requires-python = ">=3.10"
dependencies = []
keywords = ["game engine", "2d", "save game", "sprites", "viewport"]
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
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["enginebravo"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
