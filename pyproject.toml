[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fizik"
version = "0.1.0"
description = "A small 2D particle simulation with gravity, Coulomb forces and elastic collisions, rendered as block-character text."
requires-python = ">=3.10"
dependencies = []
keywords = ["physics", "simulation", "gravity", "coulomb", "collision", "particles"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
fizik = "fizik.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["fizik"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
