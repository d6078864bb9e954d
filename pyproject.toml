[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lkmath"
version = "0.5.0"
description = "Reusable mathematical tools: vectors, n-dimensional arrays, intervals, modular arithmetic, permutations, small groups and graph exploration."
requires-python = ">=3.10"
dependencies = []
keywords = ["math", "algebra", "geometry", "gamedev", "algorithm", "intervals", "grid"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["lkmath"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
