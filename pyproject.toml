[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gravdash"
version = "0.1.0"
description = "Gravity Dash game logic: gravity-flipping characters, targets, saws, timers, boosts and scoring, driven by explicit time steps"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "arcade", "gravity", "simulation", "bezier"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
gravdash = "gravdash.program:main"

[tool.hatch.build.targets.wheel]
packages = ["gravdash"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
