[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ccline"
version = "1.0.9"
description = "Configuration models, colour themes and editor state for a configurable, powerline-style status line"
requires-python = ">=3.11"
keywords = ["statusline", "powerline", "themes", "terminal", "nerd-font", "tui"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: User Interfaces",
    "Topic :: Terminals",
]
dependencies = []

[project.optional-dependencies]
test = [
    "pytest>=7.0",
]

[tool.hatch.build.targets.wheel]
packages = ["ccline"]

[tool.pytest.ini_options]
addopts = "-ra"
