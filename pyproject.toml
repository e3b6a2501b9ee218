[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "springbox"
version = "0.1.0"
description = "A small 2D physics sandbox with bodies, springs, gravitation and collisions"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["physics", "simulation", "springs", "particles", "sandbox", "2d"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Physics",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
springbox = "springbox.app:main"

[tool.hatch.build.targets.wheel]
packages = ["springbox"]

[tool.pytest.ini_options]
addopts = "-ra"
