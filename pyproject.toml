[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gnuspecs"
version = "0.1.0"
description = "Chainable builders for gnuplot option strings: lines, points, text, titles, frames, borders, minor tics, histograms and draw commands."
requires-python = ">=3.10"
dependencies = []
keywords = ["gnuplot", "plotting", "visualization", "specs", "scripting"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Visualization",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["gnuspecs"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
