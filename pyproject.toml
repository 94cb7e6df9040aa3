[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "quirkprintf"
version = "0.1.0"
description = "A small printf-style formatter with its own set of conversions and flag rules"
requires-python = ">=3.10"
dependencies = []
keywords = ["printf", "format", "formatting", "string", "conversion"]
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
    "Topic :: Software Development :: Libraries",
    "Topic :: Text Processing :: General",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
quirkprintf = "quirkprintf.printer:main"

[tool.hatch.build.targets.wheel]
packages = ["quirkprintf"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
