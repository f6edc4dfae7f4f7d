[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "adprt"
version = "0.1.0"
description = "Runtime support for algebraic dynamic programming: sequences, terminal parsers, filters, shapes, rules and Pareto front merging"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "dynamic programming",
    "algebraic dynamic programming",
    "sequence alignment",
    "rna",
    "pareto",
    "multi-objective",
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
    "Topic :: Scientific/Engineering :: Bio-Informatics",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[tool.hatch.build.targets.wheel]
packages = ["adprt"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
