[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gaymwtf"
version = "0.1.0"
description = "A modular 2D tile-and-chunk game engine core built on pygame."
requires-python = ">=3.10"
keywords = ["game-engine", "2d", "tiles", "chunks", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: pygame",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
gaymwtf-demo = "gaymwtf.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["gaymwtf"]

[tool.pytest.ini_options]
addopts = "-ra"
