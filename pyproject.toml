[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "timenorm"
version = "0.1.0"
description = "Normalisation of broken-down date/time values and conversion to Unix timestamps"
requires-python = ">=3.10"
dependencies = []
keywords = ["date", "time", "timestamp", "normalize", "calendar", "timezone"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["timenorm"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
