[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cpalgos"
version = "0.1.0"
description = "Competitive programming algorithms: knapsack, geometry, graphs, linear programming and string matching."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "competitive-programming",
    "knapsack",
    "geometry",
    "lca",
    "heavy-light-decomposition",
    "simplex",
    "kmp",
    "manacher",
    "n-queens",
]
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
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cpalgos-knapsack = "cpalgos.knapsack:main"
cpalgos-circles = "cpalgos.geometry:main"
cpalgos-bfs = "cpalgos.bfs:main"
cpalgos-lca = "cpalgos.lca:main"
cpalgos-derangement = "cpalgos.derangement:main"
cpalgos-hld = "cpalgos.hld:main"
cpalgos-simplex = "cpalgos.simplex:main"
cpalgos-kmp = "cpalgos.kmp:main"
cpalgos-manacher = "cpalgos.manacher:main"

[tool.hatch.build.targets.wheel]
packages = ["cpalgos"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
