[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "blindalgos"
version = "0.1.0"
description = "Classic array, search, bit-manipulation and dynamic-programming algorithms"
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "dynamic programming", "binary search", "bit manipulation", "interview"]
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
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["blindalgos"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
