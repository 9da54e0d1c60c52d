[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dotlinker"
version = "1.0.0"
description = "Symlink your dotfiles into a target directory"
requires-python = ">=3.10"
dependencies = []
keywords = ["cli", "symlink", "dotfiles"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
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
dot-linker = "dotlinker.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["dotlinker"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
