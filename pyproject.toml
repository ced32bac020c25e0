[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "simpledb"
version = "0.1.0"
description = "Building blocks for a small relational database: block locking, transaction numbers, pin bookkeeping, record schemas and layouts, and query predicates."
requires-python = ">=3.10"
dependencies = []
keywords = ["database", "locking", "transactions", "schema", "predicate"]
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
    "Topic :: Database :: Database Engines/Servers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["simpledb"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
