[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hookrunner"
version = "0.1.0"
description = "Building blocks for running Git hooks: file filtering, command templating, script lookup, ordering and hook file housekeeping"
requires-python = ">=3.10"
dependencies = []
keywords = ["git", "hooks", "pre-commit", "runner", "glob"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Version Control :: Git",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["hookrunner"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
