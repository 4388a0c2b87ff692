[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "padcore"
version = "0.8.19"
description = "Editing core of a simple text editor: text buffer, undo/redo, indentation, search and replace, line numbers, menu state and file coding options"
requires-python = ">=3.10"
dependencies = []
keywords = ["text editor", "undo", "redo", "search", "replace", "indent", "buffer"]
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
    "Topic :: Text Editors",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
padcore = "padcore.app:main"

[tool.hatch.build.targets.wheel]
packages = ["padcore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
