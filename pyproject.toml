[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cstrtools"
version = "0.1.0"
description = "C-style string routines, error messages, UTF-8 wide-string encoding, and small cat and grep filters"
requires-python = ">=3.10"
dependencies = []
keywords = ["string", "strtok", "strerror", "wcstombs", "cat", "grep", "text"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
    "Topic :: Text Processing :: Filters",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cstrtools-cat = "cstrtools.cat:main"
cstrtools-grep = "cstrtools.grep:main"

[tool.hatch.build.targets.wheel]
packages = ["cstrtools"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
