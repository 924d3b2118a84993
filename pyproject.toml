[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cellularity"
version = "0.1.0"
description = "A cellular automaton simulator with pluggable rules, boundaries and neighborhoods, plus a small Tk desktop viewer."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "cellular automata",
    "game of life",
    "conway",
    "simulation",
    "artificial life",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Life",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cellularity = "cellularity.ui.app:main"

[tool.hatch.build.targets.wheel]
packages = ["cellularity"]

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
warn_redundant_casts = true
