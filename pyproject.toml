[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "imgview"
version = "0.1.0"
description = "Building blocks of an image viewer: action sequences, configuration with defaults, an image cache and a descriptor poller"
requires-python = ">=3.10"
dependencies = []
keywords = ["image", "viewer", "configuration", "actions", "cache", "poll"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Viewers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["imgview"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
