[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "schedsim"
version = "0.1.0"
description = "Building blocks for simulating a uniprocessor scheduler with contiguous memory allocation and swapping"
requires-python = ">=3.10"
dependencies = []
keywords = ["scheduling", "simulation", "operating-systems", "fcfs", "spn", "swapping", "process-control"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: System :: Operating System",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["schedsim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
