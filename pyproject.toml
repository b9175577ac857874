[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "plotkernels"
version = "0.6.0"
description = "Reference implementations of proof-of-space plotting kernels: stable radix sort, bucket offsets, pipeline primitives and Xs sort-and-pack"
requires-python = ">=3.10"
dependencies = []
keywords = ["proof-of-space", "radix-sort", "bucketing", "plotting", "reference-implementation"]
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
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["plotkernels"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
