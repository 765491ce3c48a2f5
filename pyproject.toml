[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ludogame"
version = "0.1.0"
description = "A two-player Ludo board game, one human against a computer opponent, drawn with pygame."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["ludo", "board game", "pygame", "dice"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
ludogame = "ludogame.game:main"

[tool.hatch.build.targets.wheel]
packages = ["ludogame"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
