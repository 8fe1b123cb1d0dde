"""A small software 3D renderer: vectors, sprites, a rasteriser and an OBJ mesh viewer."""

__version__ = "0.1.0"