[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algolab"
version = "0.1.0"
description = "Classic algorithms and data structures for study: sorting, heaps, trees, string search, small puzzles, simulations and PCA."
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = [
    "algorithms",
    "data-structures",
    "sorting",
    "heap",
    "linked-list",
    "avl",
    "binary-search-tree",
    "kmp",
    "2048",
    "readers-writers",
    "pca",
    "education",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
algolab-bst = "algolab.bst:main"
algolab-avl = "algolab.avl:main"
algolab-kmp = "algolab.kmp:main"
algolab-prefix = "algolab.prefix:main"
algolab-2048 = "algolab.game2048:main"
algolab-readers-writers = "algolab.readers_writers:main"
algolab-students = "algolab.students:main"
algolab-pca = "algolab.pca:main"

[tool.hatch.build.targets.wheel]
packages = ["algolab"]

[tool.pytest.ini_options]
addopts = "-ra"
