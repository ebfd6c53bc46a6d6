[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "terraphy"
version = "0.1.0"
description = "Building blocks for detecting, counting and enumerating phylogenetic terraces"
requires-python = ">=3.10"
dependencies = []
keywords = ["phylogenetics", "terrace", "supertree", "multitree", "bioinformatics"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Bio-Informatics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["terraphy"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
