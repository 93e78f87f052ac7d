[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pongo"
version = "0.1.0"
description = "A small two-paddle Pong game with an optional computer opponent"
requires-python = ">=3.10"
keywords = ["pong", "game", "arcade", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
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
dependencies = [
    "pygame",
    "numpy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
pongo = "pongo.main:main"

[tool.hatch.build.targets.wheel]
packages = ["pongo"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
