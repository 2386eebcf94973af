# materials/metal.py
from typing import TYPE_CHECKING, Optional, Tuple, Union

from pathtracer.core.ray import Ray
from pathtracer.core.utils import random_in_unit_sphere, reflect
from pathtracer.core.vector import Color, Vector3
from pathtracer.materials.material import Material
from pathtracer.materials.textures import Texture, as_texture

if TYPE_CHECKING:
    from pathtracer.geometry.hittable import HitRecord


class Metal(Material):
    """
    Metal material with fuzzy reflection and texture support.
    """
    def __init__(self, albedo: Union[Vector3, Texture], fuzz: float = 0.0):
        self.texture = as_texture(albedo)
        self.fuzz = min(max(fuzz, 0.0), 1.0)

    def scatter(self, ray_in: Ray, rec: "HitRecord", rng) -> Optional[Tuple[Color, Ray]]:
        reflected = reflect(ray_in.direction.normalize(), rec.normal)
        scattered = Ray(rec.p, reflected + random_in_unit_sphere(rng) * self.fuzz, ray_in.time)

        if scattered.direction.dot(rec.normal) > 0:
            return self.texture.value(rec.u, rec.v, rec.p), scattered

        return None  # Absorb the ray if it does not scatter forward
