[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "newtonfractal"
version = "1.0.0"
description = "Newton-Raphson fractal for z^3 - 1: convergence grids computed sequentially or by a master/worker scheme"
requires-python = ">=3.10"
dependencies = []
keywords = ["fractal", "newton-raphson", "complex analysis", "parallel computing", "benchmark"]
classifiers = [
    "Development Status :: 4 - Beta",
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
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: System :: Benchmark",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
newton-seq = "newtonfractal.cli:main_seq"
newton-mpi = "newtonfractal.cli:main_mpi"
newton-hybrid = "newtonfractal.cli:main_hybrid"
newton-optimized = "newtonfractal.cli:main_optimized"

[tool.hatch.build.targets.wheel]
packages = ["newtonfractal"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]
