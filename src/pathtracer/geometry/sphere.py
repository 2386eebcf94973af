# geometry/sphere.py
import math
from typing import Optional

from pathtracer.core.aabb import AABB
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3
from pathtracer.geometry.hittable import Hittable, HitRecord


def get_sphere_uv(p: Vector3) -> tuple:
    """
    Maps a point on the unit sphere to (u, v) texture coordinates.

    u is the angle around the Y axis from X=-1, v the angle from Y=-1 to Y=+1,
    both scaled to [0, 1]:
        ( 1, 0, 0) -> (0.50, 0.50)    (-1, 0, 0) -> (0.00, 0.50)
        ( 0, 1, 0) -> (0.50, 1.00)    ( 0,-1, 0) -> (0.50, 0.00)
        ( 0, 0, 1) -> (0.25, 0.50)    ( 0, 0,-1) -> (0.75, 0.50)
    """
    theta = math.acos(max(-1.0, min(1.0, -p.y)))
    phi = math.atan2(-p.z, p.x) + math.pi
    return phi / (2 * math.pi), theta / math.pi


def _hit_sphere(center: Vector3, radius: float, material, ray: Ray,
                t_min: float, t_max: float) -> Optional[HitRecord]:
    oc = ray.origin - center
    a = ray.direction.dot(ray.direction)
    half_b = oc.dot(ray.direction)
    c = oc.dot(oc) - radius * radius
    discriminant = half_b * half_b - a * c

    # A zero radius or zero direction has no surface to hit.
    if discriminant < 0 or a == 0 or radius == 0:
        return None

    sqrt_disc = math.sqrt(discriminant)
    # Find the nearest root that lies in the acceptable range
    root = (-half_b - sqrt_disc) / a
    if root <= t_min or root >= t_max:
        root = (-half_b + sqrt_disc) / a
        if root <= t_min or root >= t_max:
            return None

    rec = HitRecord()
    rec.t = root
    rec.p = ray.at(rec.t)
    outward_normal = (rec.p - center) / radius
    rec.set_face_normal(ray, outward_normal)
    rec.u, rec.v = get_sphere_uv(outward_normal)
    rec.material = material
    return rec


class Sphere(Hittable):
    """
    Represents a sphere defined by its center, radius, and material.
    """
    def __init__(self, center: Vector3, radius: float, material):
        self.center = center
        self.radius = radius
        self.material = material

    def hit(self, ray: Ray, t_min: float, t_max: float, rng=None) -> Optional[HitRecord]:
        return _hit_sphere(self.center, self.radius, self.material, ray, t_min, t_max)

    def bounding_box(self, time0: float = 0.0, time1: float = 1.0) -> AABB:
        # The bounding box of a sphere is center ± radius
        offset = Vector3(abs(self.radius), abs(self.radius), abs(self.radius))
        return AABB(self.center - offset, self.center + offset)


class MovingSphere(Hittable):
    """
    A sphere whose center moves linearly from center0 at time0 to center1 at time1.
    """
    def __init__(self, center0: Vector3, center1: Vector3, radius: float, material,
                 time0: float = 0.0, time1: float = 1.0):
        self.center0 = center0
        self.center1 = center1
        self.time0 = time0
        self.time1 = time1
        self.radius = radius
        self.material = material

    def center(self, time: float) -> Vector3:
        if self.time1 == self.time0:
            return self.center0
        fraction = (time - self.time0) / (self.time1 - self.time0)
        return self.center0 + (self.center1 - self.center0) * fraction

    def hit(self, ray: Ray, t_min: float, t_max: float, rng=None) -> Optional[HitRecord]:
        return _hit_sphere(self.center(ray.time), self.radius, self.material, ray, t_min, t_max)

    def bounding_box(self, time0: float = 0.0, time1: float = 1.0) -> AABB:
        # Union of the boxes at both ends of the time range.
        offset = Vector3(abs(self.radius), abs(self.radius), abs(self.radius))
        c0 = self.center(time0)
        c1 = self.center(time1)
        box0 = AABB(c0 - offset, c0 + offset)
        box1 = AABB(c1 - offset, c1 + offset)
        return AABB.surrounding_box(box0, box1)
