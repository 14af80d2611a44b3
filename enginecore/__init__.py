"""Vector and matrix math, billboard particles, scene management, input state and text helpers for a small 3D engine."""

__version__ = "0.1.0"

__all__ = ["input", "matrix", "mymath", "particles", "scenes", "textutil", "vector"]