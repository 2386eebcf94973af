# renderer/integrator.py
from pathtracer.config import INFINITY, T_MIN
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Color
from pathtracer.geometry.hittable import Hittable


def ray_color(ray: Ray, background: Color, world: Hittable, depth: int, rng) -> Color:
    """
    Radiance arriving along `ray`.

    Each bounce adds the emission of the surface hit, weighted by the
    attenuation accumulated so far, and continues with the scattered ray.
    A miss returns the background; running out of bounces (depth reaching
    zero) gathers no more light. This is the recursive
    ``emitted + attenuation * ray_color(scattered, depth - 1)`` unrolled
    into a loop so deep bounce limits cannot exhaust the call stack.
    """
    color = Color(0.0, 0.0, 0.0)
    throughput = Color(1.0, 1.0, 1.0)

    for _ in range(depth):
        # T_MIN skips the surface the ray just left
        rec = world.hit(ray, T_MIN, INFINITY, rng)
        if rec is None:
            return color + throughput * background

        emitted = rec.material.emitted(rec.u, rec.v, rec.p)
        color = color + throughput * emitted

        scattered = rec.material.scatter(ray, rec, rng)
        if scattered is None:
            return color
        attenuation, ray = scattered
        throughput = throughput * attenuation

    # exceeded ray bounce limit, no more light gathered
    return color
