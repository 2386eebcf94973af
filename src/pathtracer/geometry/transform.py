# geometry/transform.py
import math
from typing import Optional

from pathtracer.core.aabb import AABB
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3
from pathtracer.geometry.hittable import Hittable, HitRecord

_AXIS_NAMES = {"x": 0, "y": 1, "z": 2}


class Translate(Hittable):
    """
    Moves a wrapped object by an offset.

    Instead of moving the object, the incoming ray is moved backwards by
    the offset and the resulting hit point is moved forwards again.
    """
    def __init__(self, obj: Hittable, offset: Vector3):
        self.obj = obj
        self.offset = offset

    def hit(self, ray: Ray, t_min: float, t_max: float, rng=None) -> Optional[HitRecord]:
        moved = Ray(ray.origin - self.offset, ray.direction, ray.time)
        rec = self.obj.hit(moved, t_min, t_max, rng)
        if rec is None:
            return None
        rec.p = rec.p + self.offset
        return rec

    def bounding_box(self, time0: float = 0.0, time1: float = 1.0) -> AABB:
        box = self.obj.bounding_box(time0, time1)
        return AABB(box.minimum + self.offset, box.maximum + self.offset)


class Rotate(Hittable):
    """
    Rotates a wrapped object by an angle (in degrees) about one principal axis.

    The incoming ray is taken into object space with the inverse rotation,
    and the hit point and normal are brought back with the forward rotation.
    """
    def __init__(self, obj: Hittable, angle: float, axis=1):
        if isinstance(axis, str):
            axis = _AXIS_NAMES.get(axis.lower(), axis)
        if axis not in (0, 1, 2):
            raise ValueError(f"Rotation axis must be 0, 1, 2 or 'x', 'y', 'z', got {axis!r}")
        self.obj = obj
        self.angle = angle
        self.axis = axis
        radians = math.radians(angle)
        self.sin_theta = math.sin(radians)
        self.cos_theta = math.cos(radians)

        # The two coordinates that rotate; the third stays fixed.
        self._i, self._j = [(1, 2), (2, 0), (0, 1)][axis]

        bbox = obj.bounding_box(0.0, 1.0)
        minimum = [math.inf] * 3
        maximum = [-math.inf] * 3
        for i in range(2):
            for j in range(2):
                for k in range(2):
                    corner = Vector3(
                        bbox.maximum.x if i else bbox.minimum.x,
                        bbox.maximum.y if j else bbox.minimum.y,
                        bbox.maximum.z if k else bbox.minimum.z,
                    )
                    rotated = self._forward(corner)
                    for a in range(3):
                        minimum[a] = min(minimum[a], rotated[a])
                        maximum[a] = max(maximum[a], rotated[a])
        self.box = AABB(Vector3(*minimum), Vector3(*maximum))

    def _rotate(self, v: Vector3, sin_theta: float) -> Vector3:
        c = [v.x, v.y, v.z]
        a = c[self._i]
        b = c[self._j]
        c[self._i] = self.cos_theta * a - sin_theta * b
        c[self._j] = sin_theta * a + self.cos_theta * b
        return Vector3(*c)

    def _forward(self, v: Vector3) -> Vector3:
        return self._rotate(v, self.sin_theta)

    def _inverse(self, v: Vector3) -> Vector3:
        return self._rotate(v, -self.sin_theta)

    def hit(self, ray: Ray, t_min: float, t_max: float, rng=None) -> Optional[HitRecord]:
        rotated = Ray(self._inverse(ray.origin), self._inverse(ray.direction), ray.time)
        rec = self.obj.hit(rotated, t_min, t_max, rng)
        if rec is None:
            return None
        rec.p = self._forward(rec.p)
        rec.normal = self._forward(rec.normal)
        return rec

    def bounding_box(self, time0: float = 0.0, time1: float = 1.0) -> AABB:
        return self.box


class RotateX(Rotate):
    def __init__(self, obj: Hittable, angle: float):
        super().__init__(obj, angle, 0)


class RotateY(Rotate):
    def __init__(self, obj: Hittable, angle: float):
        super().__init__(obj, angle, 1)


class RotateZ(Rotate):
    def __init__(self, obj: Hittable, angle: float):
        super().__init__(obj, angle, 2)
