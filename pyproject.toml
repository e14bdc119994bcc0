[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "dstructs"
version = "0.1.0"
description = "Classic data structures and algorithms: graphs, heaps, search trees, Huffman trees, hashing and string matching"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data structures",
    "algorithms",
    "graph",
    "heap",
    "linked list",
    "binary search tree",
    "avl tree",
    "red-black tree",
    "splay tree",
    "huffman",
    "kmp",
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
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dstructs-graph = "dstructs.graph:main"
dstructs-prim-list = "dstructs.weighted_list_graph:main"
dstructs-prim-matrix = "dstructs.weighted_matrix_graph:main"

[tool.setuptools.packages.find]
include = ["dstructs*"]

[tool.pytest.ini_options]
addopts = "-ra"
