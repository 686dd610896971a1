[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "arkanoid"
version = "0.1.0"
description = "A brick-breaking arcade game with power-ups, lasers and per-level best scores"
requires-python = ">=3.10"
keywords = ["arkanoid", "breakout", "arcade", "game", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
arkanoid = "arkanoid.main:main"

[tool.hatch.build.targets.wheel]
packages = ["arkanoid"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
