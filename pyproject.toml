[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pmpcore"
version = "0.1.0"
description = "Core building blocks for polygon mesh processing: property arrays, heaps, quadrics, normal cones, tessellation, colour maps and trackball camera math."
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = [
    "geometry",
    "mesh",
    "polygon",
    "quadric",
    "heap",
    "trackball",
    "tessellation",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Multimedia :: Graphics :: 3D Modeling",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["pmpcore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
ignore_missing_imports = true
