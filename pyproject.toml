[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dynmenu"
version = "4.9"
description = "A terminal menu that filters lines from standard input, plus a file-testing filter for building item lists"
requires-python = ">=3.10"
dependencies = []
keywords = ["menu", "launcher", "filter", "terminal", "stest"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dynmenu = "dynmenu.cli:main"
dynmenu-stest = "dynmenu.stest:main"

[tool.hatch.build.targets.wheel]
packages = ["dynmenu"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
