[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "arrayalgos"
version = "0.1.0"
description = "Classic array, search and matrix algorithms on plain Python lists"
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "arrays", "binary-search", "matrix", "two-pointers", "merge-sort"]
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
packages = ["arrayalgos"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
