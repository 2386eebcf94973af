# core/aabb.py
import math

from pathtracer.core.vector import Vector3


def _safe_inverse(d: float) -> float:
    # Python raises on division by zero; slabs rely on IEEE infinities instead.
    if d == 0.0:
        return math.copysign(math.inf, d)
    return 1.0 / d


class AABB:
    """
    Axis-aligned bounding box stored as its componentwise minimum and
    maximum corners. Boxes are never mutated; combining boxes creates a new one.
    """
    def __init__(self, minimum: Vector3, maximum: Vector3):
        self.minimum = minimum
        self.maximum = maximum

    @classmethod
    def empty(cls) -> "AABB":
        """Degenerate zero-size box at the origin."""
        return cls(Vector3(0, 0, 0), Vector3(0, 0, 0))

    def axis_interval(self, axis: int) -> tuple:
        return self.minimum[axis], self.maximum[axis]

    def hit(self, ray, t_min: float, t_max: float) -> bool:
        # Slab method: for each axis, find intersection intervals.
        origin = ray.origin
        direction = ray.direction
        for a in range(3):
            invD = _safe_inverse(direction[a])
            o = origin[a]
            t0 = (self.minimum[a] - o) * invD
            t1 = (self.maximum[a] - o) * invD
            if invD < 0:
                t0, t1 = t1, t0
            # inf * 0 gives nan when the origin sits on a slab plane; nan never shrinks the interval.
            t_min = t0 if t0 > t_min else t_min
            t_max = t1 if t1 < t_max else t_max
            if t_max <= t_min:
                return False
        return True

    def contains(self, other: "AABB") -> bool:
        return all(
            self.minimum[a] <= other.minimum[a] and other.maximum[a] <= self.maximum[a]
            for a in range(3)
        )

    def surface_area(self) -> float:
        d = self.maximum - self.minimum
        return 2 * (d.x * d.y + d.x * d.z + d.y * d.z)

    @staticmethod
    def surrounding_box(box0: "AABB", box1: "AABB") -> "AABB":
        small = Vector3(
            min(box0.minimum.x, box1.minimum.x),
            min(box0.minimum.y, box1.minimum.y),
            min(box0.minimum.z, box1.minimum.z)
        )
        big = Vector3(
            max(box0.maximum.x, box1.maximum.x),
            max(box0.maximum.y, box1.maximum.y),
            max(box0.maximum.z, box1.maximum.z)
        )
        return AABB(small, big)

    def __repr__(self) -> str:
        return f"AABB({self.minimum!r}, {self.maximum!r})"
