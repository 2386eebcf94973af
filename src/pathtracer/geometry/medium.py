# geometry/medium.py
import math
import random
from typing import Optional, Union

from pathtracer.config import INFINITY, MEDIUM_EXIT_OFFSET
from pathtracer.core.aabb import AABB
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3
from pathtracer.geometry.hittable import Hittable, HitRecord
from pathtracer.materials.isotropic import Isotropic
from pathtracer.materials.textures import Texture


class ConstantMedium(Hittable):
    """
    Participating medium of constant density filling a boundary surface.

    A ray crossing the volume scatters within any small distance dL with
    probability density * dL, so the free-flight distance is exponentially
    distributed. If the sampled distance lies beyond the exit point the
    ray passes through without a hit.
    """
    def __init__(self, boundary: Hittable, density: float,
                 albedo: Union[Vector3, Texture], seed: Optional[int] = None):
        if density <= 0:
            raise ValueError(f"Medium density must be positive, got {density}")
        self.boundary = boundary
        self.density = density
        self.neg_inv_density = -1.0 / density
        self.phase_function = Isotropic(albedo)
        # Only used when a caller does not thread its own generator through.
        self._fallback_rng = random.Random(seed)

    def hit(self, ray: Ray, t_min: float, t_max: float, rng=None) -> Optional[HitRecord]:
        if rng is None:
            rng = self._fallback_rng

        rec1 = self.boundary.hit(ray, -INFINITY, INFINITY, rng)
        if rec1 is None:
            return None
        rec2 = self.boundary.hit(ray, rec1.t + MEDIUM_EXIT_OFFSET, INFINITY, rng)
        if rec2 is None:
            return None

        t1 = max(rec1.t, t_min)
        t2 = min(rec2.t, t_max)
        if t1 >= t2:
            return None
        t1 = max(t1, 0.0)

        ray_length = ray.direction.length()
        distance_inside_boundary = (t2 - t1) * ray_length
        # 1 - random() lies in (0, 1], keeping the logarithm finite.
        hit_distance = self.neg_inv_density * math.log(1.0 - rng.random())

        if hit_distance > distance_inside_boundary:
            return None

        t = t1 + hit_distance / ray_length
        return HitRecord(
            p=ray.at(t),
            normal=Vector3(1, 0, 0),  # arbitrary
            t=t,
            front_face=True,  # arbitrary
            material=self.phase_function,
            u=0.0,
            v=0.0,
        )

    def bounding_box(self, time0: float = 0.0, time1: float = 1.0) -> AABB:
        return self.boundary.bounding_box(time0, time1)
