# materials/lambertian.py
from typing import TYPE_CHECKING, Tuple, Union

from pathtracer.core.ray import Ray
from pathtracer.core.utils import random_unit_vector
from pathtracer.core.vector import Color, Vector3
from pathtracer.materials.material import Material
from pathtracer.materials.textures import Texture, as_texture

if TYPE_CHECKING:
    from pathtracer.geometry.hittable import HitRecord


class Lambertian(Material):
    """
    Matte (Lambertian diffuse) material with texture support.
    """

    def __init__(self, albedo: Union[Vector3, Texture]):
        # Store either a solid color or a texture.
        self.texture = as_texture(albedo)

    def scatter(self, ray_in: Ray, rec: "HitRecord", rng) -> Tuple[Color, Ray]:
        """
        Scatter a ray according to a Lambertian reflection model.
        Returns (attenuation, scattered_ray).
        """
        # Pick a random scatter direction by adding a random vector to the normal.
        scatter_direction = rec.normal + random_unit_vector(rng)

        # If the random vector cancelled the normal, just use the normal.
        if scatter_direction.near_zero():
            scatter_direction = rec.normal
        else:
            scatter_direction = scatter_direction.normalize()

        scattered = Ray(rec.p, scatter_direction, ray_in.time)
        attenuation = self.texture.value(rec.u, rec.v, rec.p)
        return attenuation, scattered
