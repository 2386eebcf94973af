from pathtracer.geometry.hittable import Hittable, HitRecord
from pathtracer.geometry.world import HittableList
from pathtracer.geometry.bvh import BVHNode
from pathtracer.geometry.sphere import Sphere, MovingSphere, get_sphere_uv
from pathtracer.geometry.quad import Quad
from pathtracer.geometry.rect import Rect, Block
from pathtracer.geometry.transform import Translate, Rotate, RotateX, RotateY, RotateZ
from pathtracer.geometry.medium import ConstantMedium

__all__ = [
    "Hittable",
    "HitRecord",
    "HittableList",
    "BVHNode",
    "Sphere",
    "MovingSphere",
    "get_sphere_uv",
    "Quad",
    "Rect",
    "Block",
    "Translate",
    "Rotate",
    "RotateX",
    "RotateY",
    "RotateZ",
    "ConstantMedium",
]
