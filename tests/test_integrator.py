"""Unit tests for the radiance estimator."""

import pytest

from pathtracer.core import Color, Point3, Ray, Vector3
from pathtracer.geometry import HittableList, Sphere
from pathtracer.materials import DiffuseLight, Lambertian, Metal
from pathtracer.renderer import ray_color

SKY = Color(0.7, 0.8, 1.0)
BLACK = Color(0, 0, 0)


def forward_ray():
    return Ray(Point3(0, 0, 0), Vector3(0, 0, -1))


class TestRayColor:
    """Tests for ray_color."""

    def test_zero_depth_is_black(self, rng):
        world = HittableList([Sphere(Point3(0, 0, -1), 0.5, DiffuseLight(Color(4, 4, 4)))])
        assert ray_color(forward_ray(), SKY, world, 0, rng) == BLACK

    def test_miss_returns_background(self, rng):
        assert ray_color(forward_ray(), SKY, HittableList(), 5, rng) == SKY

    def test_light_returns_emission(self, rng):
        world = HittableList([Sphere(Point3(0, 0, -1), 0.5, DiffuseLight(Color(4, 4, 4)))])
        assert ray_color(forward_ray(), SKY, world, 5, rng) == Color(4, 4, 4)

    def test_single_bounce_gathers_nothing_from_diffuse(self, rng, gray):
        world = HittableList([Sphere(Point3(0, 0, -1), 0.5, gray)])
        assert ray_color(forward_ray(), SKY, world, 1, rng) == BLACK

    def test_diffuse_sphere_under_sky(self, rng):
        # A lone convex sphere: every scattered ray escapes to the background.
        world = HittableList([Sphere(Point3(0, 0, -1), 0.5, Lambertian(Color(0.5, 0.5, 0.5)))])
        white = Color(1, 1, 1)
        for _ in range(20):
            color = ray_color(forward_ray(), white, world, 10, rng)
            assert color.to_tuple() == pytest.approx((0.5, 0.5, 0.5))

    def test_mirror_reflects_background(self, rng):
        world = HittableList([Sphere(Point3(0, 0, -1), 0.5, Metal(Color(0.8, 0.6, 0.4), 0.0))])
        color = ray_color(forward_ray(), SKY, world, 5, rng)
        assert color.to_tuple() == pytest.approx((0.8 * 0.7, 0.6 * 0.8, 0.4 * 1.0))

    def test_emission_seen_in_mirror(self, rng):
        mirror = Sphere(Point3(0, 0, -1), 0.5, Metal(Color(0.5, 0.5, 0.5), 0.0))
        light = Sphere(Point3(0, 0, 5), 1.0, DiffuseLight(Color(2, 2, 2)))
        world = HittableList([mirror, light])
        color = ray_color(forward_ray(), BLACK, world, 5, rng)
        assert color.to_tuple() == pytest.approx((1, 1, 1))
        # With one bounce only the mirror is reached; the light is one bounce too far.
        assert ray_color(forward_ray(), BLACK, world, 1, rng) == BLACK

    def test_closed_room_without_light_is_dark(self, rng, gray):
        # Inside a diffuse sphere with no emitters, no light can arrive.
        world = HittableList([Sphere(Point3(0, 0, 0), 10, gray)])
        for _ in range(20):
            assert ray_color(forward_ray(), SKY, world, 8, rng) == BLACK
