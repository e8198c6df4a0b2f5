[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "e170sim"
version = "0.1.0"
description = "Regional jet systems simulation: electrical network, hydraulic actuator, cockpit instruments and a message bus"
requires-python = ">=3.10"
dependencies = []
keywords = ["simulation", "aircraft", "electrical", "hydraulic", "flight-simulator"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
e170sim = "e170sim.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["e170sim"]

[tool.pytest.ini_options]
addopts = "-ra"
