[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "threadcraft"
version = "0.1.0"
description = "Thread ownership helpers, a parallel accumulator and small validation utilities"
requires-python = ">=3.10"
dependencies = []
keywords = ["threading", "concurrency", "join", "parallel", "accumulate", "validation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
threadcraft = "threadcraft.thread_owner:main"

[tool.hatch.build.targets.wheel]
packages = ["threadcraft"]

[tool.pytest.ini_options]
addopts = "-ra"
