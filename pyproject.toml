[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "exercisekit"
version = "0.1.0"
description = "Small classic programming exercises: expression conversion and evaluation, a calculator, recursion, arrays and a greeting"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "exercises",
    "infix",
    "postfix",
    "prefix",
    "recursion",
    "calculator",
    "arrays",
    "education",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
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
exercisekit-expressions = "exercisekit.expressions:main"
exercisekit-calculator = "exercisekit.calculator:main"
exercisekit-recursion = "exercisekit.recursion:main"
exercisekit-arrays = "exercisekit.arrays:main"
exercisekit-greeting = "exercisekit.greeting:main"

[tool.hatch.build.targets.wheel]
packages = ["exercisekit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
