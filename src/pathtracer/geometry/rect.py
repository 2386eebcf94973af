# geometry/rect.py
from typing import Optional

from pathtracer.config import RECT_THICKNESS
from pathtracer.core.aabb import AABB
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3
from pathtracer.geometry.hittable import Hittable, HitRecord
from pathtracer.geometry.world import HittableList

# plane name -> (first in-plane axis, second in-plane axis, fixed axis)
_RECT_AXES = {
    "xy": (0, 1, 2),
    "xz": (0, 2, 1),
    "yz": (1, 2, 0),
}


class Rect(Hittable):
    """
    Axis-aligned rectangle lying in one of the xy, xz or yz planes.

    u_range and v_range bound the two in-plane coordinates (in the order
    the plane is named), k is the position along the remaining axis.
    """
    def __init__(self, u_range: tuple, v_range: tuple, k: float, axis: str, material):
        if axis not in _RECT_AXES:
            raise ValueError(f"Unknown rect plane {axis!r}; expected one of {sorted(_RECT_AXES)}")
        self.u0, self.u1 = u_range
        self.v0, self.v1 = v_range
        self.k = k
        self.axis = axis
        self.material = material
        self._a, self._b, self._c = _RECT_AXES[axis]
        normal = [0.0, 0.0, 0.0]
        normal[self._c] = 1.0
        self.outward_normal = Vector3(*normal)

    def hit(self, ray: Ray, t_min: float, t_max: float, rng=None) -> Optional[HitRecord]:
        d = ray.direction[self._c]
        # Parallel rays and zero-area rects never hit.
        if d == 0 or self.u1 == self.u0 or self.v1 == self.v0:
            return None
        t = (self.k - ray.origin[self._c]) / d
        if t <= t_min or t >= t_max:
            return None

        a = ray.origin[self._a] + t * ray.direction[self._a]
        b = ray.origin[self._b] + t * ray.direction[self._b]
        if a < self.u0 or a > self.u1 or b < self.v0 or b > self.v1:
            return None

        rec = HitRecord(
            p=ray.at(t),
            t=t,
            material=self.material,
            u=(a - self.u0) / (self.u1 - self.u0),
            v=(b - self.v0) / (self.v1 - self.v0),
        )
        rec.set_face_normal(ray, self.outward_normal)
        return rec

    def bounding_box(self, time0: float = 0.0, time1: float = 1.0) -> AABB:
        # Pad the fixed axis so the box has non-zero width.
        lo = [0.0, 0.0, 0.0]
        hi = [0.0, 0.0, 0.0]
        lo[self._a], hi[self._a] = self.u0, self.u1
        lo[self._b], hi[self._b] = self.v0, self.v1
        lo[self._c], hi[self._c] = self.k - RECT_THICKNESS, self.k + RECT_THICKNESS
        return AABB(Vector3(*lo), Vector3(*hi))


class Block(Hittable):
    """
    Axis-aligned box made of six rectangles sharing one material.
    """
    def __init__(self, p_min: Vector3, p_max: Vector3, material):
        self.p_min = p_min
        self.p_max = p_max
        x0, y0, z0 = p_min
        x1, y1, z1 = p_max

        self.sides = HittableList([
            Rect((x0, x1), (y0, y1), z1, "xy", material),
            Rect((x0, x1), (y0, y1), z0, "xy", material),
            Rect((x0, x1), (z0, z1), y1, "xz", material),
            Rect((x0, x1), (z0, z1), y0, "xz", material),
            Rect((y0, y1), (z0, z1), x1, "yz", material),
            Rect((y0, y1), (z0, z1), x0, "yz", material),
        ])

    def hit(self, ray: Ray, t_min: float, t_max: float, rng=None) -> Optional[HitRecord]:
        return self.sides.hit(ray, t_min, t_max, rng)

    def bounding_box(self, time0: float = 0.0, time1: float = 1.0) -> AABB:
        return AABB(self.p_min, self.p_max)
