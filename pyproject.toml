[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "taskrun"
version = "0.1.0"
description = "Building blocks for a YAML-driven task runner: argument parsing, output styles, up-to-date checks and helper tools"
requires-python = ">=3.10"
keywords = ["task runner", "build tool", "taskfile", "make", "automation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Build Tools",
    "Typing :: Typed",
]
dependencies = [
    "python-dotenv",
    "semver",
    "pyyaml",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
taskrun-sleepit = "taskrun.sleepit:main"
taskrun-release = "taskrun.release:main"

[tool.hatch.build.targets.wheel]
packages = ["taskrun"]

[tool.hatch.build.targets.sdist]
include = ["taskrun", "tests", "pyproject.toml", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
ignore_missing_imports = true
