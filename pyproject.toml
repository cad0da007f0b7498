[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "petbox"
version = "0.1.0"
description = "A small terminal virtual pet: play with it, feed it and keep it healthy."
requires-python = ">=3.10"
dependencies = [
    "blessed",
]
keywords = ["tamagotchi", "virtual pet", "terminal", "game"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
petbox = "petbox.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["petbox"]

[tool.pytest.ini_options]
addopts = "-ra"
