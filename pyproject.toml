[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bowlscore"
version = "0.1.0"
description = "Ten-pin bowling score keeper with an interactive console game"
requires-python = ">=3.10"
keywords = ["bowling", "ten-pin", "score", "game", "console"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
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
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bowlscore = "bowlscore.game:main"

[tool.hatch.build.targets.wheel]
packages = ["bowlscore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
