[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "darkroom"
version = "0.1.0"
description = "A terminal exploration game: generate a wasteland map around a village, walk it step by step and keep food, water and health in check."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "roguelike", "exploration", "survival", "procedural-generation"]
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
    "Topic :: Games/Entertainment :: Role-Playing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
darkroom = "darkroom.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["darkroom"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
