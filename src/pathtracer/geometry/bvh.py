# geometry/bvh.py
import logging
import random
from typing import Optional, Sequence

from pathtracer.core.aabb import AABB
from pathtracer.core.ray import Ray
from pathtracer.errors import SceneError
from pathtracer.geometry.hittable import Hittable, HitRecord

logger = logging.getLogger(__name__)


def _box_min(obj: Hittable, axis: int) -> float:
    # Ordering always uses the box over the full shutter interval.
    return obj.bounding_box(0.0, 1.0).minimum[axis]


class BVHNode(Hittable):
    """
    Binary bounding volume hierarchy node.

    Each node splits its objects at the median along a randomly chosen axis.
    A single object is stored in both children, so traversal never needs
    to check for a missing child.
    """
    def __init__(self, objects: Sequence[Hittable], time0: float = 0.0, time1: float = 1.0,
                 rng: Optional[random.Random] = None):
        if not objects:
            raise SceneError("Cannot build a BVH from an empty object list")
        if rng is None:
            rng = random.Random()
        objects = list(objects)

        axis = rng.randint(0, 2)
        span = len(objects)

        if span == 1:
            self.left = self.right = objects[0]
        elif span == 2:
            self.left, self.right = objects
            if _box_min(self.left, axis) > _box_min(self.right, axis):
                self.left, self.right = self.right, self.left
        else:
            objects.sort(key=lambda obj: _box_min(obj, axis))
            mid = span // 2
            self.left = BVHNode(objects[:mid], time0, time1, rng)
            self.right = BVHNode(objects[mid:], time0, time1, rng)

        self.box = AABB.surrounding_box(
            self.left.bounding_box(time0, time1),
            self.right.bounding_box(time0, time1),
        )
        if span > 2:
            logger.debug("BVH node over %d objects split on axis %d", span, axis)

    def hit(self, ray: Ray, t_min: float, t_max: float, rng=None) -> Optional[HitRecord]:
        if not self.box.hit(ray, t_min, t_max):
            return None

        hit_left = self.left.hit(ray, t_min, t_max, rng)

        # Update t_max for right branch if we hit something on the left
        if hit_left is not None:
            t_max = hit_left.t

        hit_right = self.right.hit(ray, t_min, t_max, rng)
        return hit_right if hit_right is not None else hit_left

    def bounding_box(self, time0: float = 0.0, time1: float = 1.0) -> AABB:
        return self.box

    def depth(self) -> int:
        """Height of the tree below this node, leaves counting as one level."""
        left = self.left.depth() if isinstance(self.left, BVHNode) else 1
        right = self.right.depth() if isinstance(self.right, BVHNode) else 1
        return 1 + max(left, right)
