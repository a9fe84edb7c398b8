"""Voxel skeleton helpers, sparse skeleton graphs, and planning over them."""

__version__ = "0.1.0"