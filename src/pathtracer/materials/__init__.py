from pathtracer.materials.textures import (
    Texture,
    SolidTexture,
    CheckerTexture,
    ImageTexture,
    NoiseTexture,
)
from pathtracer.materials.perlin import Perlin
from pathtracer.materials.texture_loader import load_image
from pathtracer.materials.material import Material
from pathtracer.materials.lambertian import Lambertian
from pathtracer.materials.metal import Metal
from pathtracer.materials.dielectric import Dielectric
from pathtracer.materials.diffuse_light import DiffuseLight
from pathtracer.materials.isotropic import Isotropic

__all__ = [
    "Texture",
    "SolidTexture",
    "CheckerTexture",
    "ImageTexture",
    "NoiseTexture",
    "Perlin",
    "load_image",
    "Material",
    "Lambertian",
    "Metal",
    "Dielectric",
    "DiffuseLight",
    "Isotropic",
]
