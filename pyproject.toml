[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rescueplan"
version = "0.1.0"
description = "Backtracking disaster-supply planning, network file parsing, shift-calendar layout helpers and a console demo."
requires-python = ">=3.10"
dependencies = []
keywords = ["recursion", "backtracking", "dominating-set", "graph", "education", "scheduling"]
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
    "Environment :: Console",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
rescueplan = "rescueplan.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["rescueplan"]

[tool.pytest.ini_options]
addopts = "-ra"
