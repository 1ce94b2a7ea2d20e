[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "graphalgo"
version = "0.1.0"
description = "Weighted undirected graphs with BFS, DFS, Dijkstra and Prim algorithms"
requires-python = ">=3.10"
dependencies = []
keywords = ["graph", "bfs", "dfs", "dijkstra", "prim", "minimum spanning tree", "shortest path"]
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
graphalgo-demo = "graphalgo.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["graphalgo"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
