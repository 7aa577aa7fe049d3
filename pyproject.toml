[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mazebot"
version = "0.1.0"
description = "Grid maze mapping, path search and PID steering for a differential-drive robot"
requires-python = ">=3.10"
dependencies = []
keywords = ["robotics", "maze", "path-planning", "bfs", "pid", "navigation"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
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

[tool.hatch.build.targets.wheel]
packages = ["mazebot"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
