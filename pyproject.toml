[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "containerlib"
version = "0.1.0"
description = "Ordered containers with cursors: an AVL tree map, a mergeable skew-heap priority queue and a checked vector, plus a big integer and a dense matrix."
requires-python = ">=3.10"
dependencies = []
keywords = ["avl", "tree map", "priority queue", "skew heap", "vector", "big integer", "matrix", "containers"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["containerlib"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
