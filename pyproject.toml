[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dotsym"
version = "0.1.0"
description = "Symlink dotfiles into place from an org-mode table declaration file."
requires-python = ">=3.10"
dependencies = []
keywords = ["dotfiles", "symlink", "org-mode", "configuration"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX",
    "Operating System :: Microsoft :: Windows",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Systems Administration",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dotsym = "dotsym.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["dotsym"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
