[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pokehospital"
version = "0.1.0"
description = "A Pokemon hospital simulator and terminal game: attend trainers and guess the level of each Pokemon in treatment."
requires-python = ">=3.10"
dependencies = []
keywords = ["pokemon", "simulator", "game", "heap", "binary-search-tree", "terminal"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Education",
    "Natural Language :: Spanish",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pokehospital = "pokehospital.game:main"

[tool.hatch.build.targets.wheel]
packages = ["pokehospital"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
