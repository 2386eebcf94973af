from pathtracer.core.vector import Vector3, Point3, Color
from pathtracer.core.ray import Ray
from pathtracer.core.aabb import AABB
from pathtracer.core.utils import (
    random_in_unit_disk,
    random_in_unit_sphere,
    random_unit_vector,
    random_vector,
    reflect,
    refract,
    schlick,
)

__all__ = [
    "Vector3",
    "Point3",
    "Color",
    "Ray",
    "AABB",
    "random_in_unit_disk",
    "random_in_unit_sphere",
    "random_unit_vector",
    "random_vector",
    "reflect",
    "refract",
    "schlick",
]
