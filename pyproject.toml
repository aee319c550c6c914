[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hepemdata"
version = "0.1.0"
description = "Data structures for electromagnetic shower physics tables with JSON serialisation"
requires-python = ">=3.10"
dependencies = []
keywords = ["physics", "electromagnetic", "simulation", "cross-sections", "json"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["hepemdata"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
