[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "knightofashes"
version = "0.1.0"
description = "A small side-scrolling action RPG: a knight, bonfires, mobs and tile maps read from text files."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "rpg", "platformer", "side-scroller", "pygame", "tile-map"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
knightofashes = "knightofashes.app:main"

[tool.hatch.build.targets.wheel]
packages = ["knightofashes"]

[tool.pytest.ini_options]
addopts = "-ra"
