[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "deskbits"
version = "0.1.4"
description = "A plain-text notepad core, a grid snake game and a tiny signal/slot toolkit."
requires-python = ">=3.10"
dependencies = [
    "pygments",
]
keywords = ["notepad", "text editor", "snake", "game", "signals", "slots"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Editors",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
deskbits-notepad = "deskbits.app:main"
deskbits-snake = "deskbits.snake_game:main"
deskbits-signals = "deskbits.signals:main"

[tool.hatch.build.targets.wheel]
packages = ["deskbits"]

[tool.pytest.ini_options]
addopts = "-ra"
