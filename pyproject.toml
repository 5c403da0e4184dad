[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bcplopt"
version = "0.1.0"
description = "Syntax tree, constant folding and dead-code passes, and a tree printer for BCPL programs"
requires-python = ">=3.10"
dependencies = []
keywords = ["bcpl", "compiler", "optimizer", "constant-folding", "dead-code", "ast"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Compilers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["bcplopt"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
