[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "overlayui"
version = "0.1.0"
description = "Toolkit-independent building blocks for touch-driven overlay user interfaces: geometry, hit testing, input routing, layout scaling and UI package loading"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "ui",
    "overlay",
    "touch",
    "input",
    "hit-testing",
    "quadtree",
    "layout",
    "object-pool",
]
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
    "Topic :: Software Development :: User Interfaces",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["overlayui"]

[tool.hatch.build.targets.sdist]
include = ["overlayui", "tests", "pyproject.toml", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"
