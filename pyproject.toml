[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bytepipe"
version = "0.1.0"
description = "A bounded, in-memory byte stream with separate writer and reader views"
requires-python = ">=3.10"
dependencies = []
keywords = ["byte stream", "buffer", "flow control", "pipe", "bounded buffer"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["bytepipe"]

[tool.pytest.ini_options]
addopts = "-ra"
