"""Tests for the example scene registry."""

import math
import random

import numpy as np
import pytest
from PIL import Image

from pathtracer.core import Color
from pathtracer.errors import SceneError, TextureLoadError
from pathtracer.geometry import BVHNode, MovingSphere, Sphere
from pathtracer.materials import Dielectric, Lambertian, Metal
from pathtracer.scenes import SCENES, Scene, build_scene

CHEAP_SCENES = ["two_perlin_spheres", "quads", "simple_light", "cornell_box", "cornell_smoke"]


def center_ray(scene, rng):
    return scene.camera.get_ray(0.5, 0.5, rng)


def leaves(node):
    """Collect the distinct primitives under a BVH node."""
    if not isinstance(node, BVHNode):
        return {id(node): node}
    found = leaves(node.left)
    found.update(leaves(node.right))
    return found


class TestSceneRegistry:
    """Tests for build_scene and the registered builders."""

    def test_registry_names(self):
        assert set(SCENES) == {
            "random_spheres",
            "two_perlin_spheres",
            "earth",
            "quads",
            "simple_light",
            "cornell_box",
            "cornell_smoke",
        }

    def test_unknown_scene(self):
        with pytest.raises(SceneError, match="Unknown scene"):
            build_scene("teapot")

    @pytest.mark.parametrize("name", CHEAP_SCENES)
    def test_builds_bvh_world(self, name, rng):
        scene = build_scene(name, 1.0, rng)
        assert isinstance(scene, Scene)
        assert isinstance(scene.world, BVHNode)
        assert scene.camera.aspect_ratio == 1.0

    @pytest.mark.parametrize("name", CHEAP_SCENES)
    def test_center_ray_hits_something(self, name, rng):
        scene = build_scene(name, 1.0, rng)
        assert scene.world.hit(center_ray(scene, rng), 0.001, math.inf, rng) is not None

    def test_light_scenes_have_black_background(self, rng):
        for name in ("simple_light", "cornell_box", "cornell_smoke"):
            assert build_scene(name, 1.0, rng).background == Color(0, 0, 0)

    def test_random_spheres_is_reproducible(self):
        a = build_scene("random_spheres", 1.5, random.Random(5), extent=2)
        b = build_scene("random_spheres", 1.5, random.Random(5), extent=2)
        rng_a, rng_b = random.Random(1), random.Random(1)
        for _ in range(20):
            ray_a = a.camera.get_ray(rng_a.random(), rng_a.random(), rng_a)
            ray_b = b.camera.get_ray(rng_b.random(), rng_b.random(), rng_b)
            hit_a = a.world.hit(ray_a, 0.001, math.inf)
            hit_b = b.world.hit(ray_b, 0.001, math.inf)
            assert (hit_a and hit_a.t) == (hit_b and hit_b.t)

    def test_random_spheres_moves_metal_and_glass(self):
        scene = build_scene("random_spheres", 1.5, random.Random(5))
        small = [obj for obj in leaves(scene.world).values() if obj.radius == 0.2]
        moving = [obj for obj in small if isinstance(obj, MovingSphere)]
        static = [obj for obj in small if isinstance(obj, Sphere)]
        assert moving and static
        assert len(moving) + len(static) == len(small)
        for sphere in moving:
            assert isinstance(sphere.material, (Metal, Dielectric))
            assert sphere.center1.y >= sphere.center0.y
        for sphere in static:
            assert isinstance(sphere.material, Lambertian)

    def test_earth_requires_texture(self, tmp_path, rng):
        with pytest.raises(TextureLoadError):
            build_scene("earth", 1.0, rng, texture_path=tmp_path / "missing.jpg")

    def test_earth_with_texture(self, tmp_path, rng):
        path = tmp_path / "earth.png"
        Image.fromarray(np.full((8, 16, 3), 200, dtype=np.uint8)).save(path)
        scene = build_scene("earth", 2.0, rng, texture_path=path)
        rec = scene.world.hit(center_ray(scene, rng), 0.001, math.inf)
        assert rec is not None
        attenuation, _ = rec.material.scatter(center_ray(scene, rng), rec, rng)
        assert attenuation.to_tuple() == pytest.approx((200 / 255,) * 3)
