[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dsquiz"
version = "0.1.0"
description = "Classic data structures (vector, circular queue, stack, binary heap, linked list) with quiz-style operations and small algorithmic problems"
requires-python = ">=3.10"
dependencies = []
keywords = ["data structures", "vector", "queue", "stack", "heap", "linked list", "algorithms"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Topic :: Education",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dsquiz = "dsquiz.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["dsquiz"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
