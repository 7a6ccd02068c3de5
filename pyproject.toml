[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "basicgames"
version = "0.1.0"
description = "Small classic games: tic-tac-toe, number guessing, word jumble, a virtual pet farm, Pong, Brick Breaker and a space map explorer"
requires-python = ">=3.10"
keywords = ["games", "pong", "brick-breaker", "tic-tac-toe", "tamagochi", "roguelike", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
basicgames-tictactoe = "basicgames.tictactoe:main"
basicgames-guess-number = "basicgames.guess_number:main"
basicgames-word-jumble = "basicgames.word_jumble:main"
basicgames-tamagochi = "basicgames.tamagochi_cli:main"
basicgames-pong = "basicgames.pong:main"
basicgames-brickbreaker = "basicgames.brickbreaker:main"
basicgames-space-rogue = "basicgames.space_rogue:main"

[tool.hatch.build.targets.wheel]
packages = ["basicgames"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
