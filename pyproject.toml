[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "polyhedra"
version = "1.0.0"
description = "Platonic solid classification, polyhedral mesh import, triangle subdivision and UCD export"
requires-python = ">=3.10"
dependencies = []
keywords = ["polyhedra", "mesh", "platonic solids", "triangulation", "ucd", "paraview"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
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
polyhedra = "polyhedra.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["polyhedra"]

[tool.pytest.ini_options]
addopts = "-ra"
