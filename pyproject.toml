[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "studytimer"
version = "0.1.0"
description = "Study companion core: timer, session records, todos, reminders, flashcards, settings, tabs, calculator and a small file terminal"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "study",
    "timer",
    "flashcards",
    "spaced-repetition",
    "todo",
    "reminders",
    "calculator",
    "terminal",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Office/Business :: Scheduling",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["studytimer"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
