[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rotorkit"
version = "0.1.0"
description = "Antenna rotator building blocks: Plan13 orbit prediction, a buffered character-LCD screen, localized display text, and compass and LCD drivers over an abstract I2C bus."
requires-python = ">=3.10"
dependencies = []
keywords = ["antenna", "rotator", "ham radio", "satellite", "plan13", "lcd", "magnetometer", "i2c"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: Ham Radio",
    "Topic :: Scientific/Engineering :: Astronomy",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["rotorkit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
