[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "uninst"
version = "0.2"
description = "Read, check and unpack the file data of IRIX 'inst' software packages"
requires-python = ">=3.10"
dependencies = []
keywords = ["irix", "inst", "idb", "lzw", "extract", "package", "sgi", "checksum"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: System Administrators",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Archiving :: Packaging",
    "Topic :: System :: Archiving :: Compression",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["uninst"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
