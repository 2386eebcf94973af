"""Offline Monte Carlo path tracer."""

__version__ = "0.1.0"

from pathtracer.core import AABB, Color, Point3, Ray, Vector3
from pathtracer.errors import PathTracerError, SceneError, TextureLoadError

__all__ = [
    "__version__",
    "AABB",
    "Color",
    "Point3",
    "Ray",
    "Vector3",
    "PathTracerError",
    "SceneError",
    "TextureLoadError",
]
