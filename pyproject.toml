[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bullsparade"
version = "0.1.0"
description = "A small tile-map platformer with sprite animation, gravity, jumping and side scrolling"
requires-python = ">=3.10"
keywords = ["game", "platformer", "tilemap", "tiled", "pygame", "side-scroller"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
bullsparade = "bullsparade.game:main"

[tool.hatch.build.targets.wheel]
packages = ["bullsparade"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
