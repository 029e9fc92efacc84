[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "coldet"
version = "0.1.0"
description = "Collision bookkeeping, friction and motion-state helpers for spheres on planes"
requires-python = ">=3.10"
dependencies = ["numpy"]
keywords = ["physics", "collision detection", "rigid bodies", "simulation", "friction"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["coldet"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
