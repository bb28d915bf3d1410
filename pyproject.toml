[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "qor"
version = "0.1.0"
description = "Game engine pieces: input switches and controllers, prefab geometry, path helpers, headless flags and audio error strings"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "engine", "input", "gamepad", "geometry", "prefab"]
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
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["qor"]

[tool.pytest.ini_options]
addopts = "-ra"
