[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "clrgen"
version = "0.1.0"
description = "Canonical LR(1) parser table generator and shift-reduce parse simulator"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "parser",
    "lr1",
    "clr",
    "grammar",
    "first-follow",
    "parsing-table",
    "shift-reduce",
    "compiler",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Compilers",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
clrgen = "clrgen.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["clrgen"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
