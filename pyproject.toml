[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algostudy"
version = "0.1.0"
description = "Classic searching, sorting, recursion and array algorithms for study"
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "sorting", "searching", "recursion", "education"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
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
algostudy-sort = "algostudy.sorting:main"
algostudy-search = "algostudy.searching:main"
algostudy-recursion = "algostudy.recursion:main"
algostudy-timing = "algostudy.timing:main"

[tool.hatch.build.targets.wheel]
packages = ["algostudy"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
