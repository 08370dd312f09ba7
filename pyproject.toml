[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bbcore"
version = "0.1.0"
description = "Instruction generation, validation and PNG previews for a two-motor belt-driven drawing machine"
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = ["plotter", "polargraph", "drawing machine", "stepper", "preview"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["bbcore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
