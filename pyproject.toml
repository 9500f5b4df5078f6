[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "adderbench"
version = "0.1.0"
description = "Step binary adder circuits through every input combination and print the expected results"
requires-python = ">=3.10"
dependencies = []
keywords = ["adder", "binary", "twos-complement", "logic", "digital-circuits", "education"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Environment :: Console",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
adderbench = "adderbench.bench:main"

[tool.hatch.build.targets.wheel]
packages = ["adderbench"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
