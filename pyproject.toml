[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "olympiadsolve"
version = "0.1.0"
description = "Solvers for nine bronze, silver and gold olympiad programming problems"
requires-python = ">=3.10"
dependencies = []
keywords = ["olympiad", "competitive-programming", "algorithms", "puzzles"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
olympiadsolve = "olympiadsolve.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["olympiadsolve"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
