[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fuzzygear"
version = "0.1.0"
description = "Fuzzy-logic gear selection from vehicle velocity, engine RPM and throttle position"
requires-python = ">=3.10"
dependencies = []
keywords = ["fuzzy logic", "gearbox", "transmission", "mamdani", "automotive"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
fuzzygear = "fuzzygear.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["fuzzygear"]

[tool.pytest.ini_options]
addopts = "-ra"
