[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "linecli"
version = "0.1.0"
description = "Building blocks for interactive command line interfaces: argument splitting, completion prefixes, strict argument parsing, colour sequences and an asyncio telnet front end."
requires-python = ">=3.10"
dependencies = []
keywords = ["cli", "command line", "telnet", "shell", "prompt", "completion"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Framework :: AsyncIO",
    "Topic :: Software Development :: User Interfaces",
    "Topic :: Terminals :: Telnet",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[tool.hatch.build.targets.wheel]
packages = ["linecli"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
