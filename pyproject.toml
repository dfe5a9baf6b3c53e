[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pollkit"
version = "1.0.3"
description = "Readiness interests, events and event sources for non-blocking I/O."
requires-python = ">=3.10"
dependencies = []
keywords = ["io", "async", "non-blocking", "poll", "events", "readiness"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["pollkit"]

[tool.pytest.ini_options]
addopts = "-ra"
