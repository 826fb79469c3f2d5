[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dsalgo"
version = "0.1.0"
description = "Classic data structures and algorithms: arrays, lists, stacks, queues, trees, heaps, hash tables, shortest paths and locality-sensitive hashing"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "data-structures",
    "sorting",
    "linked-list",
    "stack",
    "queue",
    "binary-tree",
    "binary-search-tree",
    "heap",
    "priority-queue",
    "hash-table",
    "shortest-paths",
    "dijkstra",
    "bellman-ford",
    "floyd-warshall",
    "lsh",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dsalgo-demo = "dsalgo.demo:main"
dsalgo-lsh = "dsalgo.lsh:main"

[tool.hatch.build.targets.wheel]
packages = ["dsalgo"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
