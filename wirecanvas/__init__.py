"""Grayscale canvas drawing, 3D vector and matrix helpers, and wireframe projection."""

__version__ = "0.1.0"
__all__ = ["canvas", "math3d", "renderer", "demo"]