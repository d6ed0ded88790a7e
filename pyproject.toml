[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ghostscad"
version = "0.1.0"
description = "Build OpenSCAD models from Python objects and render them to SCAD or STL files"
requires-python = ">=3.10"
dependencies = []
keywords = ["openscad", "scad", "cad", "3d", "modeling", "stl", "csg"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Manufacturing",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Modeling",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ghostscad-examples = "ghostscad.examples:main"

[tool.hatch.build.targets.wheel]
packages = ["ghostscad"]

[tool.hatch.build.targets.sdist]
include = ["ghostscad", "tests", "README.md"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
