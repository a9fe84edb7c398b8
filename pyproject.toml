[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "skelgraph"
version = "0.1.0"
description = "Voxel skeleton helpers and sparse topological graphs of free space: template-based thinning tests, graph operations, A* planning and serialization."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "skeleton",
    "voronoi",
    "gvd",
    "voxel",
    "topology",
    "thinning",
    "path planning",
    "a-star",
    "graph",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[tool.hatch.build.targets.wheel]
packages = ["skelgraph"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
