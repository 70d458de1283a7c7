[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "grocerycash"
version = "0.1.0"
description = "Grocery items with stock and discount tracking, plus simple multi-currency money values."
requires-python = ">=3.10"
dependencies = []
keywords = ["grocery", "inventory", "currency", "point-of-sale", "shop"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
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

[tool.hatch.build.targets.wheel]
packages = ["grocerycash"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
