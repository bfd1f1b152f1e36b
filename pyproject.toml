[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lexpath"
version = "0.1.0"
description = "Lexical POSIX-style path handling, portable name checks, unique path names and whole-file helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["path", "lexical", "normalize", "relative", "portability", "unique"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["lexpath"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
