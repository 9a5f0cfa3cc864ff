[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "refresher"
version = "0.1.0"
description = "Small utilities for byte arrays, bitmaps, fixed-size records, strings and file I/O"
requires-python = ">=3.10"
dependencies = []
keywords = ["bitmap", "binary", "records", "endianness", "serialization"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Intended Audience :: Developers",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["refresher"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
