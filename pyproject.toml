[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "adjgraph"
version = "0.1.0"
description = "A small weighted graph kept as an adjacency matrix, with BFS and DFS traversal and a scripted demo"
requires-python = ">=3.10"
dependencies = []
keywords = ["graph", "adjacency matrix", "bfs", "dfs", "weighted graph"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
adjgraph-demo = "adjgraph.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["adjgraph"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
