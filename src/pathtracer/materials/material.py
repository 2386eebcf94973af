# materials/material.py
from typing import TYPE_CHECKING, Optional, Tuple

from pathtracer.core.ray import Ray
from pathtracer.core.vector import Color, Vector3

if TYPE_CHECKING:
    from pathtracer.geometry.hittable import HitRecord

BLACK = Color(0, 0, 0)


class Material:
    """
    Abstract material class. Subclasses must implement scatter().
    Materials are immutable and may be shared by many surfaces.
    """
    def scatter(self, ray_in: Ray, rec: "HitRecord", rng) -> Optional[Tuple[Color, Ray]]:
        """
        Computes the attenuation and scattered ray.
        Returns a tuple (attenuation, scattered_ray) or None if the ray is absorbed.
        """
        raise NotImplementedError("scatter() must be implemented by subclasses.")

    def emitted(self, u: float, v: float, p: Vector3) -> Color:
        """
        Light emitted at the hit point. Non-emissive materials are black.
        """
        return BLACK
