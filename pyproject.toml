[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sphgrid"
version = "0.1.0"
description = "Building blocks for particle-based (SPH) fluid simulation: spatial hash grids, neighbour contacts, performance counters and scene helpers."
requires-python = ">=3.10"
dependencies = []
keywords = ["sph", "fluid", "simulation", "particles", "spatial-hash", "neighbour-search", "physics"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
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

[tool.hatch.build.targets.wheel]
packages = ["sphgrid"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
