"""Shared fixtures for the path tracer tests."""

import random

import pytest

from pathtracer.core import Color, Point3, Vector3
from pathtracer.geometry import HitRecord
from pathtracer.materials import Lambertian


@pytest.fixture
def rng():
    """Seeded generator so stochastic tests are repeatable."""
    return random.Random(1234)


@pytest.fixture
def gray():
    return Lambertian(Color(0.5, 0.5, 0.5))


@pytest.fixture
def make_hit():
    """Factory for a hit record on an upward-facing surface at the origin."""

    def _make(material, normal=None, front_face=True, p=None):
        return HitRecord(
            p=p or Point3(0, 0, 0),
            normal=normal or Vector3(0, 1, 0),
            t=1.0,
            front_face=front_face,
            material=material,
            u=0.5,
            v=0.5,
        )

    return _make


class SequenceRng:
    """Stand-in generator replaying fixed values, for exact scatter checks."""

    def __init__(self, values, fallback=0.5):
        self._values = list(values)
        self._fallback = fallback

    def _next(self):
        if self._values:
            return self._values.pop(0)
        return self._fallback

    def uniform(self, a, b):
        return self._next()

    def random(self):
        return self._next()


@pytest.fixture
def sequence_rng():
    return SequenceRng
