[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "columndb"
version = "0.1.0"
description = "A small column-oriented database engine with a binary on-disk format and cached joins"
requires-python = ">=3.10"
dependencies = []
keywords = ["database", "column-store", "storage", "join"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Database :: Database Engines/Servers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["columndb"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
