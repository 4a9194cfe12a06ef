[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "editgo"
version = "0.1.0"
description = "A small terminal text editor with undo/redo and periodic autosave"
requires-python = ">=3.10"
keywords = ["editor", "text-editor", "terminal", "tui", "autosave", "undo"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Environment :: Console :: Curses",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Editors",
]
dependencies = [
    "blessed",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
editgo = "editgo.app:main"

[tool.hatch.build.targets.wheel]
packages = ["editgo"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
