[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "storekeep"
version = "0.1.0"
description = "A small terminal shop keeper: clients, products and orders kept in semicolon-separated files"
requires-python = ">=3.10"
dependencies = []
keywords = ["shop", "orders", "point-of-sale", "inventory", "csv"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Point-Of-Sale",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
storekeep = "storekeep.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["storekeep"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
