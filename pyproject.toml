[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lxdialog"
version = "0.1.0"
description = "Curses dialog boxes (menu, radio list, input, yes/no, text pager) and a gettext template builder for configuration front-ends"
requires-python = ">=3.10"
dependencies = []
keywords = ["curses", "dialog", "menu", "terminal", "gettext", "pot"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console :: Curses",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: User Interfaces",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["lxdialog"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
