[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "arraykit"
version = "0.1.0"
description = "Classic list and integer algorithms: sorted set operations, in-place rearrangements, searches, spreadsheet column titles and palindrome checks."
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "lists", "searching", "rearrangement", "set-operations", "spreadsheet-columns"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["arraykit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
