[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "eventsched"
version = "0.1.0"
description = "Event scheduling with conflict-aware slot assignment and a small JSON web service"
requires-python = ">=3.10"
dependencies = [
    "flask",
]
keywords = [
    "scheduling",
    "events",
    "graph-coloring",
    "backtracking",
    "segment-tree",
    "calendar",
]
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
    "Framework :: Flask",
    "Topic :: Office/Business :: Scheduling",
    "Topic :: Internet :: WWW/HTTP :: WSGI :: Application",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
eventsched-server = "eventsched.server:main"

[tool.hatch.build.targets.wheel]
packages = ["eventsched"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]
