# materials/perlin.py
import math
import random

import numpy as np
from numba import njit

from pathtracer.config import PERLIN_POINT_COUNT, TURBULENCE_DEPTH
from pathtracer.core.utils import random_vector
from pathtracer.core.vector import Vector3

MASK = PERLIN_POINT_COUNT - 1


@njit
def perlin_noise(perm_x, perm_y, perm_z, ranvec, x, y, z):
    """
    Gradient noise at (x, y, z): Hermite-smoothed trilinear interpolation
    of the random gradients at the 8 corners of the enclosing lattice cell.
    """
    fx = math.floor(x)
    fy = math.floor(y)
    fz = math.floor(z)
    u = x - fx
    v = y - fy
    w = z - fz
    i = int(fx)
    j = int(fy)
    k = int(fz)

    uu = u * u * (3.0 - 2.0 * u)
    vv = v * v * (3.0 - 2.0 * v)
    ww = w * w * (3.0 - 2.0 * w)

    accum = 0.0
    for di in range(2):
        iterm = di * uu + (1 - di) * (1.0 - uu)
        px = perm_x[(i + di) & MASK]
        for dj in range(2):
            jterm = dj * vv + (1 - dj) * (1.0 - vv)
            py = perm_y[(j + dj) & MASK]
            for dk in range(2):
                kterm = dk * ww + (1 - dk) * (1.0 - ww)
                idx = px ^ py ^ perm_z[(k + dk) & MASK]
                dot = (ranvec[idx, 0] * (u - di) +
                       ranvec[idx, 1] * (v - dj) +
                       ranvec[idx, 2] * (w - dk))
                accum += iterm * jterm * kterm * dot
    return accum


@njit
def perlin_turbulence(perm_x, perm_y, perm_z, ranvec, x, y, z, depth):
    """
    Sum of `depth` noise octaves, each at double the frequency and half
    the weight of the previous one.
    """
    accum = 0.0
    weight = 1.0
    for _ in range(depth):
        accum += weight * perlin_noise(perm_x, perm_y, perm_z, ranvec, x, y, z)
        weight *= 0.5
        x *= 2.0
        y *= 2.0
        z *= 2.0
    return abs(accum)


def generate_permutation(rng) -> np.ndarray:
    p = list(range(PERLIN_POINT_COUNT))
    rng.shuffle(p)
    return np.array(p, dtype=np.int64)


class Perlin:
    """
    Perlin noise generator.

    The permutation tables and gradient vectors are drawn once at
    construction; after that noise() is a pure function of the point.
    """
    def __init__(self, rng=None):
        if rng is None:
            rng = random.Random()
        self.ranvec = np.array(
            [random_vector(rng, -1.0, 1.0).normalize().to_tuple() for _ in range(PERLIN_POINT_COUNT)],
            dtype=np.float64,
        )
        self.perm_x = generate_permutation(rng)
        self.perm_y = generate_permutation(rng)
        self.perm_z = generate_permutation(rng)

    def noise(self, p: Vector3) -> float:
        return float(perlin_noise(self.perm_x, self.perm_y, self.perm_z, self.ranvec,
                                  p.x, p.y, p.z))

    def turb(self, p: Vector3, depth: int = TURBULENCE_DEPTH) -> float:
        return float(perlin_turbulence(self.perm_x, self.perm_y, self.perm_z, self.ranvec,
                                       p.x, p.y, p.z, depth))
