[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "compkit"
version = "0.1.0"
description = "Algorithms and data structures for competitive programming: segment trees, disjoint sets, max flow, suffix arrays, modular arithmetic and more."
requires-python = ">=3.10"
keywords = [
    "algorithms",
    "data-structures",
    "competitive-programming",
    "segment-tree",
    "union-find",
    "max-flow",
    "suffix-array",
    "modular-arithmetic",
    "number-theoretic-transform",
    "2-sat",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
    "Topic :: Scientific/Engineering :: Mathematics",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["compkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
