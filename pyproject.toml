[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mdsyntax"
version = "0.1.0"
description = "Scanners for Markdown syntax: raw HTML, tables, smart quotes, typography, block markers and inline constructs"
requires-python = ">=3.10"
dependencies = []
keywords = ["markdown", "commonmark", "gfm", "tables", "typography", "smartquotes"]
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
    "Topic :: Text Processing :: Markup :: Markdown",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["mdsyntax"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
