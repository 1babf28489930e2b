[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kontra"
version = "0.1.0"
description = "A small toolkit for building terminal user interfaces from composable components."
requires-python = ">=3.10"
dependencies = []
keywords = ["tui", "terminal", "ansi", "console", "widgets", "layout"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: User Interfaces",
    "Topic :: Terminals",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
kontra-demo = "kontra.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["kontra"]

[tool.pytest.ini_options]
addopts = "-ra"
