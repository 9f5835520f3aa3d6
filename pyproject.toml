[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bouncefmu"
version = "0.1.0"
description = "A one-dimensional bouncing ball model with an FMI 2.0 style interface and an analytic reference solution"
requires-python = ">=3.10"
dependencies = []
keywords = ["fmi", "fmu", "simulation", "bouncing-ball", "co-simulation", "model-exchange", "physics"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bouncefmu-analytic = "bouncefmu.analytic:main"

[tool.hatch.build.targets.wheel]
packages = ["bouncefmu"]

[tool.pytest.ini_options]
addopts = "-ra"
