# materials/diffuse_light.py
from typing import TYPE_CHECKING, Union

from pathtracer.core.ray import Ray
from pathtracer.core.vector import Color, Vector3
from pathtracer.materials.material import Material
from pathtracer.materials.textures import Texture, as_texture

if TYPE_CHECKING:
    from pathtracer.geometry.hittable import HitRecord


class DiffuseLight(Material):
    """
    Area light. Emits the value of its texture and absorbs everything that hits it,
    so a path ends at the first light it reaches.
    """
    def __init__(self, emit: Union[Vector3, Texture]):
        self.texture = as_texture(emit)

    def scatter(self, ray_in: Ray, rec: "HitRecord", rng) -> None:
        return None

    def emitted(self, u: float, v: float, p: Vector3) -> Color:
        return self.texture.value(u, v, p)
