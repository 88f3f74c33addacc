[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lockpick"
version = "0.1.0"
description = "Fixed-width unsigned arithmetic on integers, hex conversion, a growable vector and bit-math helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["unsigned", "fixed-width", "arithmetic", "hex", "vector", "bits", "ansi"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["lockpick"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
