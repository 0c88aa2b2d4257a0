[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "k2dyn"
version = "0.1.0"
description = "Building blocks for dynamic k2-trees: Morton codes, packed node topologies, block frontiers and query state"
requires-python = ">=3.10"
dependencies = []
keywords = ["k2-tree", "succinct", "bitvector", "morton-code", "z-order", "sparse-matrix", "quadtree"]
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
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["k2dyn"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
