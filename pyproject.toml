[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mentalmahjong"
version = "0.1.0"
description = "Riichi mahjong game model: tiles, hands, hand-completion patterns and table layout"
requires-python = ">=3.10"
keywords = ["mahjong", "riichi", "tiles", "game", "board-game"]
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
    "Topic :: Games/Entertainment :: Board Games",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["mentalmahjong"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
