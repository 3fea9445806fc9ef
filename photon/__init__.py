"""A small software renderer that draws a perspective-projected wireframe cube."""

__version__ = "0.1.0"
__all__ = ["matrix", "primitives", "renderer", "triangle", "vertex", "window"]