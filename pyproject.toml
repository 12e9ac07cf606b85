[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "qcircsim"
version = "0.1.0"
description = "Simulate small quantum circuits from a state file and a circuit file"
requires-python = ">=3.10"
dependencies = []
keywords = ["quantum", "circuit", "simulator", "qubits", "gates"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
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
qcircsim = "qcircsim.cli:main"

[tool.setuptools.packages.find]
include = ["qcircsim*"]

[tool.pytest.ini_options]
addopts = "-ra"
