[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "arraylist"
version = "0.1.0"
description = "Doubly linked list stored in a growable array, with Graphviz and HTML dumps"
requires-python = ">=3.10"
dependencies = []
keywords = ["linked list", "data structures", "graphviz", "dump"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
arraylist = "arraylist.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["arraylist"]

[tool.pytest.ini_options]
addopts = "-ra"
