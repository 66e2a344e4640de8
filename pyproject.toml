[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pikaide"
version = "0.1.6"
description = "Editor UI state models: tabs, status line, dialogs, completion, file finder, project search and a CSV table editor"
requires-python = ">=3.10"
dependencies = []
keywords = ["editor", "ide", "tui", "csv", "fuzzy-finder", "completion"]
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
    "Topic :: Text Editors",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["pikaide"]

[tool.pytest.ini_options]
addopts = "-ra"
