[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "edline"
version = "0.1.0"
description = "A small line-oriented text editor for the terminal, in the spirit of ed"
requires-python = ">=3.10"
dependencies = []
keywords = ["editor", "ed", "line-editor", "terminal", "text"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Editors",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
edline = "edline.editor:main"

[tool.hatch.build.targets.wheel]
packages = ["edline"]

[tool.pytest.ini_options]
addopts = "-ra"
