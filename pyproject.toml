[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "basickit"
version = "0.1.0"
description = "Classic programming exercises as a library: dates, calendars, number bases, big integers, arrays, linked lists, containers, text and star patterns"
requires-python = ">=3.10"
dependencies = []
keywords = ["exercises", "algorithms", "calendar", "linked-list", "big-integer", "education"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Typing :: Typed",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["basickit"]

[tool.pytest.ini_options]
addopts = "-ra"
