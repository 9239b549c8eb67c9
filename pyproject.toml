[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "annrigd"
version = "0.1.0"
description = "Gamma-ray cascade generators for thermal neutron capture on gadolinium and event bookkeeping for a Ge/BGO detector array"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = [
    "gadolinium",
    "neutron capture",
    "gamma cascade",
    "monte carlo",
    "germanium detector",
    "BGO veto",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
annrigd = "annrigd.app:main"

[tool.hatch.build.targets.wheel]
packages = ["annrigd"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
