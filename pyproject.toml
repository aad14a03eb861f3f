[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cses-kit"
version = "0.1.0"
description = "Solutions to classic CSES problems: dynamic programming, graphs, introductory puzzles and modular arithmetic."
requires-python = ">=3.10"
dependencies = []
keywords = ["cses", "competitive-programming", "dynamic-programming", "graphs", "algorithms"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cses-kit = "cses_kit.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["cses_kit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
