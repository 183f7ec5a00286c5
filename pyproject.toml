[build-system]
requires = ["setuptools>=61.0"]
build-backend = "setuptools.build_meta"

[project]
name = "corevm"
version = "0.1.0"
description = "A Corewar virtual machine that loads .cor champions into a shared arena and steps their processes"
requires-python = ">=3.10"
dependencies = []
keywords = ["corewar", "virtual machine", "simulation", "game", "champions"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
corevm = "corevm.cli:main"

[tool.setuptools.packages.find]
include = ["corevm*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
