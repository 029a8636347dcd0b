[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tachyon"
version = "0.1.0"
description = "A small rigid-body and particle physics engine with a broadphase grid, contact generation and impulse resolution"
requires-python = ">=3.10"
dependencies = []
keywords = ["physics", "rigid body", "particles", "collision", "simulation", "quaternion"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Physics",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tachyon = "tachyon.world:main"

[tool.hatch.build.targets.wheel]
packages = ["tachyon"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
