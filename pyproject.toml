[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "grafoalg"
version = "0.1.0"
description = "Classic graph algorithms: Dijkstra, Kosaraju, Kruskal and Prim, with small command-line tools"
requires-python = ">=3.10"
dependencies = []
keywords = ["graph", "dijkstra", "kosaraju", "kruskal", "prim", "spanning-tree", "shortest-path"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
grafoalg-dijkstra = "grafoalg.dijkstra:main"
grafoalg-kosaraju = "grafoalg.kosaraju:main"
grafoalg-kruskal = "grafoalg.kruskal:main"
grafoalg-prim = "grafoalg.prim:main"
grafoalg-agm = "grafoalg.agm:main"

[tool.hatch.build.targets.wheel]
packages = ["grafoalg"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
