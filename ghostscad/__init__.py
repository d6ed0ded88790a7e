"""Build OpenSCAD models from Python objects and render them to SCAD or STL."""

__version__ = "0.1.0"