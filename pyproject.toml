[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kdforge"
version = "0.1.0"
description = "Building blocks for implicit k-d trees: level-wise sort helpers, stackless traversal, random datasets and binary storage"
requires-python = ">=3.10"
dependencies = []
keywords = ["kd-tree", "nearest neighbour", "spatial index", "geometry"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Information Analysis",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["kdforge"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
