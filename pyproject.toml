[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "crust"
version = "0.1.0"
description = "And-inverter graph reader, k-feasible cut enumerator and Graphviz exporter"
requires-python = ">=3.10"
dependencies = []
keywords = ["aig", "aiger", "and-inverter graph", "cut enumeration", "logic synthesis", "graphviz"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Environment :: Console",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Electronic Design Automation (EDA)",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
crust = "crust.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["crust"]

[tool.pytest.ini_options]
addopts = "-ra"
