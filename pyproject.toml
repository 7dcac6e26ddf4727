[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pigeonplan"
version = "0.1.0"
description = "Pigeon release planning data generator and coordinate-system plotting"
requires-python = ">=3.10"
dependencies = [
    "matplotlib",
]
keywords = ["pigeon", "logistics", "planning", "mercator", "plotting", "visualization"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Visualization",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
pigeonplan = "pigeonplan.app:main"

[tool.hatch.build.targets.wheel]
packages = ["pigeonplan"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
