[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hoersaal"
version = "0.1.0"
description = "Console exercises for a first programming course: student lists, a small lending library and shortest paths on road maps"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "education",
    "linked list",
    "student records",
    "library",
    "dijkstra",
    "console",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Natural Language :: German",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
hoersaal-liste = "hoersaal.list_app:main"
hoersaal-studenten = "hoersaal.student_app:main"
hoersaal-buecherei = "hoersaal.buecherei:main"

[tool.hatch.build.targets.wheel]
packages = ["hoersaal"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
