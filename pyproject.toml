[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "flipgame"
version = "0.1.0"
description = "A five-way attack game played between a TCP server and a terminal client"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "tcp", "client-server", "rock-paper-scissors"]
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

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
flipgame-server = "flipgame.server:main"
flipgame-client = "flipgame.client:main"

[tool.hatch.build.targets.wheel]
packages = ["flipgame"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
