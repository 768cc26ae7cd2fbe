[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "systemdesigns"
version = "0.1.0"
description = "Object-oriented models of an elevator system, a parking lot and a tic-tac-toe game"
requires-python = ">=3.10"
dependencies = []
keywords = ["elevator", "parking-lot", "tic-tac-toe", "low-level-design", "simulation"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
elevator-demo = "systemdesigns.elevator.demo:main"
parking-demo = "systemdesigns.parking.demo:main"
tictactoe = "systemdesigns.tictactoe.game:main"

[tool.hatch.build.targets.wheel]
packages = ["systemdesigns"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
