[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sqmatrix"
version = "0.1.0"
description = "Square integer matrices: addition, multiplication, diagonal sums and row/column swaps"
requires-python = ">=3.10"
keywords = ["matrix", "linear algebra", "square matrix"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Intended Audience :: Education",
    "Environment :: Console",
    "Topic :: Scientific/Engineering :: Mathematics",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sqmatrix = "sqmatrix.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["sqmatrix"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
