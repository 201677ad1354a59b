[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "shelfkeys"
version = "0.1.0"
description = "Vim-style key handling primitives for a book list: command parsing, motions, text objects, search, jumps, macros and key hints"
requires-python = ">=3.10"
dependencies = []
keywords = ["vim", "keybindings", "motions", "text-objects", "macros", "command-line", "books"]
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
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["shelfkeys"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
