[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "filetamer"
version = "0.1.0"
description = "Command-line utility for cleaning, archiving and moving files"
requires-python = ">=3.11"
dependencies = [
    "pyyaml",
]
keywords = ["files", "cleanup", "archive", "move", "copy", "glob", "cli"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Filesystems",
    "Topic :: System :: Archiving",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
filetamer = "filetamer.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["filetamer"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py311"

[tool.mypy]
python_version = "3.11"
warn_unused_ignores = true
