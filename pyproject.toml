[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dipgames"
version = "0.1.0"
description = "Game logic for higher-lower, tic-tac-toe and four-in-a-row minigames with computer opponents"
requires-python = ">=3.10"
keywords = ["games", "tic-tac-toe", "four-in-a-row", "negamax", "minigames"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Board Games",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["dipgames"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
