[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dsakit"
version = "0.1.0"
description = "Classic data structures: B-tree, binary search tree, circular queue, stacks, doubly linked list and disjoint sets"
requires-python = ">=3.10"
dependencies = []
keywords = ["data structures", "b-tree", "binary search tree", "stack", "queue", "linked list", "disjoint set", "palindrome"]
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
dsakit-btree = "dsakit.btree:main"
dsakit-bst = "dsakit.bst:main"
dsakit-circular-queue = "dsakit.circular_queue:main"
dsakit-disjoint-set = "dsakit.disjoint_set:main"
dsakit-doubly-linked = "dsakit.doubly_linked:main"
dsakit-palindrome = "dsakit.palindrome:main"
dsakit-linked-stack = "dsakit.linked_stack:main"
dsakit-array-stack = "dsakit.array_stack:main"

[tool.hatch.build.targets.wheel]
packages = ["dsakit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
