[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "prique"
version = "0.1.0"
description = "Priority queues built on a heap, a sorted linked list and sorted dynamic arrays, with a timing benchmark"
requires-python = ">=3.10"
dependencies = []
keywords = ["priority queue", "heap", "linked list", "dynamic array", "benchmark", "data structures"]
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

[project.scripts]
prique-bench = "prique.benchmark:main"

[tool.setuptools.packages.find]
include = ["prique*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
