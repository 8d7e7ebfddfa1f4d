[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "skyhash"
version = "0.1.0"
description = "Building blocks for a key/value database server: an in-memory table, UTF-8 validation, entity and table-argument parsing, response constants and file locks"
requires-python = ">=3.10"
dependencies = []
keywords = ["database", "key-value", "skyhash", "nosql", "utf-8", "file-lock"]
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
packages = ["skyhash"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
