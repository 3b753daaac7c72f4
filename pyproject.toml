[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "shellkit"
version = "0.1.0"
description = "Building blocks for a small interactive shell: string and byte helpers, printf-style formatting, line reading, signal state and a command-line parser."
requires-python = ">=3.10"
dependencies = []
keywords = ["shell", "parser", "ast", "printf", "signals", "line-reader"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["shellkit"]

[tool.pytest.ini_options]
addopts = "-ra"
