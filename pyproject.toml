[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "irsol"
version = "1.0.0"
description = "Text protocol messages, line parsing and wire serialization for the irsol camera server"
requires-python = ">=3.10"
dependencies = []
keywords = ["protocol", "camera", "solar", "astronomy", "serialization", "parser"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Astronomy",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["irsol"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
