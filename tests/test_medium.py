"""Unit tests for constant-density participating media."""

import math
import random

import pytest

from pathtracer.core import Color, Point3, Ray, Vector3
from pathtracer.geometry import Block, ConstantMedium, Sphere
from pathtracer.materials import Isotropic


def through_center():
    return Ray(Point3(0, 0, -5), Vector3(0, 0, 1))


class TestConstantMedium:
    """Tests for free-flight sampling inside a boundary."""

    def test_density_must_be_positive(self, gray):
        boundary = Sphere(Point3(0, 0, 0), 1, gray)
        with pytest.raises(ValueError):
            ConstantMedium(boundary, 0.0, Color(1, 1, 1))
        with pytest.raises(ValueError):
            ConstantMedium(boundary, -1.0, Color(1, 1, 1))

    def test_dense_medium_always_scatters(self, gray, rng):
        medium = ConstantMedium(Sphere(Point3(0, 0, 0), 1, gray), 1e6, Color(1, 1, 1))
        for _ in range(200):
            rec = medium.hit(through_center(), 0.001, math.inf, rng)
            assert rec is not None
            assert rec.t == pytest.approx(4.0, abs=1e-3)

    def test_thin_medium_never_scatters(self, gray, rng):
        medium = ConstantMedium(Sphere(Point3(0, 0, 0), 1, gray), 1e-9, Color(1, 1, 1))
        hits = sum(medium.hit(through_center(), 0.001, math.inf, rng) is not None for _ in range(200))
        assert hits == 0

    def test_scatter_probability_follows_beer_lambert(self, gray, rng):
        # Chord length 2, density 0.5: P(scatter) = 1 - exp(-1).
        medium = ConstantMedium(Sphere(Point3(0, 0, 0), 1, gray), 0.5, Color(1, 1, 1))
        trials = 4000
        hits = sum(medium.hit(through_center(), 0.001, math.inf, rng) is not None
                   for _ in range(trials))
        assert hits / trials == pytest.approx(1 - math.exp(-1), abs=0.03)

    def test_hits_stay_inside_boundary(self, gray, rng):
        medium = ConstantMedium(Sphere(Point3(0, 0, 0), 1, gray), 0.8, Color(1, 1, 1))
        for _ in range(200):
            rec = medium.hit(through_center(), 0.001, math.inf, rng)
            if rec is not None:
                assert 4.0 <= rec.t <= 6.0

    def test_ray_missing_boundary(self, gray, rng):
        medium = ConstantMedium(Sphere(Point3(0, 0, 0), 1, gray), 1e6, Color(1, 1, 1))
        ray = Ray(Point3(5, 5, -5), Vector3(0, 0, 1))
        assert medium.hit(ray, 0.001, math.inf, rng) is None

    def test_ray_starting_inside(self, gray, rng):
        medium = ConstantMedium(Sphere(Point3(0, 0, 0), 1, gray), 1e6, Color(1, 1, 1))
        rec = medium.hit(Ray(Point3(0, 0, 0), Vector3(0, 0, 1)), 0.001, math.inf, rng)
        assert rec is not None
        assert 0.001 <= rec.t < 0.01

    def test_interval_ending_before_boundary(self, gray, rng):
        medium = ConstantMedium(Sphere(Point3(0, 0, 0), 1, gray), 1e6, Color(1, 1, 1))
        assert medium.hit(through_center(), 0.001, 3.0, rng) is None

    def test_record_uses_phase_function(self, gray, rng):
        medium = ConstantMedium(Block(Point3(-1, -1, -1), Point3(1, 1, 1), gray), 1e6, Color(0.2, 0.4, 0.6))
        rec = medium.hit(through_center(), 0.001, math.inf, rng)
        assert isinstance(rec.material, Isotropic)
        assert rec.material is medium.phase_function
        assert rec.front_face
        assert rec.normal == Vector3(1, 0, 0)

    def test_same_generator_state_same_hit(self, gray):
        medium = ConstantMedium(Sphere(Point3(0, 0, 0), 1, gray), 0.7, Color(1, 1, 1))
        a = [medium.hit(through_center(), 0.001, math.inf, random.Random(8)) for _ in range(5)]
        b = [medium.hit(through_center(), 0.001, math.inf, random.Random(8)) for _ in range(5)]
        assert [r and r.t for r in a] == [r and r.t for r in b]

    def test_fallback_generator_without_rng(self, gray):
        medium = ConstantMedium(Sphere(Point3(0, 0, 0), 1, gray), 1e6, Color(1, 1, 1), seed=3)
        assert medium.hit(through_center(), 0.001, math.inf) is not None

    def test_bounding_box_is_boundary_box(self, gray):
        boundary = Sphere(Point3(1, 1, 1), 2, gray)
        box = ConstantMedium(boundary, 1.0, Color(1, 1, 1)).bounding_box()
        assert box.minimum == Point3(-1, -1, -1)
        assert box.maximum == Point3(3, 3, 3)
