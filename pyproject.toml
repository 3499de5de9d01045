[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "phoenix"
version = "0.1.0"
description = "Shell built-in commands, an environment store, a line reader and C-style string helpers"
requires-python = ">=3.10"
keywords = ["shell", "builtins", "environment", "printf", "line-reader"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Shells",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["phoenix"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
