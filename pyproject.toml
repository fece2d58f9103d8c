[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "atomblaster-ui"
version = "0.1.0"
description = "Screen models, input controllers and animation logic for a helicopter rescue arcade game"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "arcade", "ui", "menu", "animation", "helicopter"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["atomblaster_ui"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
