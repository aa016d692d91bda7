[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "accelstats"
version = "0.1.0"
description = "Accelerometer CSV loading, merge sort with running sums, and SVG charts of benchmark results"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["accelerometer", "csv", "merge sort", "svg", "plotting", "benchmark"]
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
    "Topic :: Scientific/Engineering :: Information Analysis",
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["accelstats"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
