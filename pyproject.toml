[build-system]
requires = ["setuptools>=68"]
build-backend = "setuptools.build_meta"

[project]
name = "graingrowth"
version = "0.1.0"
description = "Cellular automaton simulation of grain growth with a Tkinter viewer"
requires-python = ">=3.10"
dependencies = []
keywords = ["cellular automaton", "grain growth", "microstructure", "simulation", "von Neumann"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
graingrowth = "graingrowth.gui:main"

[tool.setuptools.packages.find]
include = ["graingrowth*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
