[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lifeboids"
version = "0.1.0"
description = "Conway's Game of Life in several timed stepping modes with benchmarks, and a flocking boids simulation."
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = [
    "game-of-life",
    "cellular-automaton",
    "boids",
    "flocking",
    "simulation",
    "benchmark",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Life",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
lifeboids-life = "lifeboids.life.app:main"
lifeboids-boids = "lifeboids.boids.scene:main"

[tool.hatch.build.targets.wheel]
packages = ["lifeboids"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
