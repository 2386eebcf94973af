# materials/dielectric.py
import math
from typing import TYPE_CHECKING, Tuple

from pathtracer.core.ray import Ray
from pathtracer.core.utils import reflect, refract, schlick
from pathtracer.core.vector import Color
from pathtracer.materials.material import Material

if TYPE_CHECKING:
    from pathtracer.geometry.hittable import HitRecord

WHITE = Color(1.0, 1.0, 1.0)


class Dielectric(Material):
    """
    Clear refractive material such as glass or water.

    A sphere with a negative radius keeps its geometry but flips its
    normals, which makes a hollow glass bubble.
    """
    def __init__(self, ref_idx: float):
        self.ref_idx = ref_idx

    def scatter(self, ray_in: Ray, rec: "HitRecord", rng) -> Tuple[Color, Ray]:
        # Determine if we're entering or exiting the material
        refraction_ratio = 1.0 / self.ref_idx if rec.front_face else self.ref_idx

        unit_direction = ray_in.direction.normalize()
        cos_theta = min(-unit_direction.dot(rec.normal), 1.0)
        sin_theta = math.sqrt(max(0.0, 1.0 - cos_theta * cos_theta))

        # Total internal reflection: Snell's law has no real solution.
        cannot_refract = refraction_ratio * sin_theta > 1.0

        if cannot_refract or rng.random() < schlick(cos_theta, refraction_ratio):
            direction = reflect(unit_direction, rec.normal)
        else:
            direction = refract(unit_direction, rec.normal, refraction_ratio)

        # Glass doesn't absorb light
        return WHITE, Ray(rec.p, direction, ray_in.time)
