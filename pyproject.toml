[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "demonophobia"
version = "0.1.0"
description = "A small side-scrolling game on pygame: a hero who walks, crouches, sits and crawls through a walled room."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "side-scroller", "pygame", "sprite-sheet", "state-machine"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
demonophobia = "demonophobia.window:main"

[tool.hatch.build.targets.wheel]
packages = ["demonophobia"]

[tool.pytest.ini_options]
addopts = "-ra"
