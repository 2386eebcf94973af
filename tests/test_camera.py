"""Unit tests for the thin-lens camera."""

import random

import pytest

from pathtracer.camera import Camera
from pathtracer.core import Point3, Vector3


@pytest.fixture
def pinhole():
    return Camera(Point3(0, 0, 0), Point3(0, 0, -1), Vector3(0, 1, 0), 90, 1.0)


class TestCamera:
    """Tests for primary ray generation."""

    def test_basis(self, pinhole):
        assert pinhole.w.to_tuple() == pytest.approx((0, 0, 1))
        assert pinhole.u.to_tuple() == pytest.approx((1, 0, 0))
        assert pinhole.v.to_tuple() == pytest.approx((0, 1, 0))

    def test_center_ray(self, pinhole, rng):
        ray = pinhole.get_ray(0.5, 0.5, rng)
        assert ray.origin == Point3(0, 0, 0)
        assert ray.direction.to_tuple() == pytest.approx((0, 0, -1))

    def test_corner_rays(self, pinhole, rng):
        # A 90 degree field of view at focus distance 1 spans [-1, 1].
        assert pinhole.get_ray(0, 0, rng).direction.to_tuple() == pytest.approx((-1, -1, -1))
        assert pinhole.get_ray(1, 1, rng).direction.to_tuple() == pytest.approx((1, 1, -1))

    def test_aspect_ratio_widens_view(self, rng):
        camera = Camera(Point3(0, 0, 0), Point3(0, 0, -1), Vector3(0, 1, 0), 90, 2.0)
        assert camera.get_ray(1, 0.5, rng).direction.to_tuple() == pytest.approx((2, 0, -1))

    def test_ray_time_within_shutter(self, rng):
        camera = Camera(Point3(0, 0, 0), Point3(0, 0, -1), Vector3(0, 1, 0), 90, 1.0,
                        time0=0.25, time1=0.5)
        for _ in range(100):
            assert 0.25 <= camera.get_ray(0.5, 0.5, rng).time <= 0.5

    def test_defocus_blur(self, rng):
        camera = Camera(Point3(0, 0, 0), Point3(0, 0, -1), Vector3(0, 1, 0), 90, 1.0,
                        aperture=2.0, focus_dist=3.0)
        origins = set()
        for _ in range(50):
            ray = camera.get_ray(0.5, 0.5, rng)
            # Lens samples stay on the lens disk...
            assert ray.origin.z == pytest.approx(0.0)
            assert ray.origin.length() < 1.0
            # ...and every ray through a pixel meets on the focus plane.
            assert ray.at(1.0).to_tuple() == pytest.approx((0, 0, -3))
            origins.add(ray.origin.to_tuple())
        assert len(origins) > 1

    def test_same_seed_same_rays(self, pinhole):
        a = [pinhole.get_ray(0.3, 0.7, random.Random(4)).time for _ in range(3)]
        b = [pinhole.get_ray(0.3, 0.7, random.Random(4)).time for _ in range(3)]
        assert a == b
