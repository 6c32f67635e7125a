[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "coursework"
version = "0.1.0"
description = "A chunked deque, regular-expression automata and the building blocks of a text adventure"
requires-python = ">=3.10"
dependencies = []
keywords = ["deque", "nfa", "dfa", "automata", "regular-expression", "text-adventure"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Intended Audience :: Education",
    "Topic :: Software Development :: Libraries",
    "Topic :: Games/Entertainment :: Role-Playing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["coursework"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
