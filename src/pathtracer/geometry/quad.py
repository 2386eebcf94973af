# geometry/quad.py
from typing import Optional

from pathtracer.config import PARALLEL_EPSILON, RECT_THICKNESS
from pathtracer.core.aabb import AABB
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3
from pathtracer.geometry.hittable import Hittable, HitRecord


def _pad(box: AABB, delta: float = RECT_THICKNESS) -> AABB:
    """Grow any axis thinner than delta so the box never has zero volume."""
    lo = [box.minimum.x, box.minimum.y, box.minimum.z]
    hi = [box.maximum.x, box.maximum.y, box.maximum.z]
    for a in range(3):
        if hi[a] - lo[a] < delta:
            lo[a] -= delta / 2
            hi[a] += delta / 2
    return AABB(Vector3(*lo), Vector3(*hi))


class Quad(Hittable):
    """
    Planar parallelogram spanned by the edges u and v from corner q.

        v ------- q + u + v
       /         /
      q ------- u
    """
    def __init__(self, q: Vector3, u: Vector3, v: Vector3, material):
        self.q = q
        self.u = u
        self.v = v
        self.material = material

        n = u.cross(v)
        self.normal = n.normalize()
        self.d = self.normal.dot(q)
        # w lets us recover the planar (alpha, beta) coordinates of a hit point.
        nn = n.dot(n)
        self.w = n / nn if nn != 0 else Vector3(0, 0, 0)

        corners = [q, q + u, q + v, q + u + v]
        self.box = _pad(AABB(
            Vector3(*(min(c[a] for c in corners) for a in range(3))),
            Vector3(*(max(c[a] for c in corners) for a in range(3))),
        ))

    def hit(self, ray: Ray, t_min: float, t_max: float, rng=None) -> Optional[HitRecord]:
        denom = self.normal.dot(ray.direction)

        # No hit if the ray is parallel to the plane.
        if abs(denom) < PARALLEL_EPSILON:
            return None

        t = (self.d - self.normal.dot(ray.origin)) / denom
        if t <= t_min or t >= t_max:
            return None

        intersection = ray.at(t)
        planar = intersection - self.q
        alpha = self.w.dot(planar.cross(self.v))
        beta = self.w.dot(self.u.cross(planar))

        if alpha < 0 or alpha > 1 or beta < 0 or beta > 1:
            return None

        rec = HitRecord(p=intersection, t=t, material=self.material, u=alpha, v=beta)
        rec.set_face_normal(ray, self.normal)
        return rec

    def bounding_box(self, time0: float = 0.0, time1: float = 1.0) -> AABB:
        return self.box
