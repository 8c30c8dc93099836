[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "orrery"
version = "0.1.0"
description = "Relativistically corrected N-body solar system simulation with a gravity-well grid"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["n-body", "gravity", "solar system", "simulation", "orbital mechanics"]
classifiers = [
    "Development Status :: 3 - Alpha",
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
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["orrery"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
