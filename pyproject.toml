[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "snaketris"
version = "0.1.0"
description = "A snake game where three body rings of one colour collapse into two"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["snake", "game", "arcade", "tetris", "pygame"]
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

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
snaketris = "snaketris.game:main"

[tool.hatch.build.targets.wheel]
packages = ["snaketris"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
