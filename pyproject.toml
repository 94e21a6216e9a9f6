[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "seriesmath"
version = "0.1.0"
description = "Elementary math functions computed from series expansions and iterative methods"
requires-python = ">=3.10"
keywords = ["math", "taylor series", "trigonometry", "logarithm", "exponential", "newton method"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["seriesmath"]

[tool.pytest.ini_options]
addopts = "-ra"
