[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algokit"
version = "0.1.0"
description = "Classic graph and search-structure algorithms: adjacency-matrix graphs, traversals, minimum spanning trees, shortest paths, binary sort trees, AVL trees, B-trees and hash tables."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "graph",
    "adjacency matrix",
    "spanning tree",
    "prim",
    "kruskal",
    "dijkstra",
    "floyd",
    "binary search tree",
    "avl",
    "b-tree",
    "hash table",
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
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["algokit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
