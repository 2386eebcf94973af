# materials/isotropic.py
from typing import TYPE_CHECKING, Tuple, Union

from pathtracer.core.ray import Ray
from pathtracer.core.utils import random_unit_vector
from pathtracer.core.vector import Color, Vector3
from pathtracer.materials.material import Material
from pathtracer.materials.textures import Texture, as_texture

if TYPE_CHECKING:
    from pathtracer.geometry.hittable import HitRecord


class Isotropic(Material):
    """Phase function of a participating medium: scatters uniformly in all directions."""

    def __init__(self, albedo: Union[Vector3, Texture]):
        self.texture = as_texture(albedo)

    def scatter(self, ray_in: Ray, rec: "HitRecord", rng) -> Tuple[Color, Ray]:
        scattered = Ray(rec.p, random_unit_vector(rng), ray_in.time)
        return self.texture.value(rec.u, rec.v, rec.p), scattered
