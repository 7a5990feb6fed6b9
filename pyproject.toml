[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sortbench"
version = "0.1.0"
description = "Benchmark of sorting algorithms run over simulated workers, with timings logged to JSON"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "sorting",
    "benchmark",
    "bucket sort",
    "odd-even sort",
    "shell sort",
    "rank sort",
    "selection sort",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Benchmark",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sortbench = "sortbench.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["sortbench"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
