"""Example scenes.

Each builder takes the image aspect ratio and a random generator and
returns a Scene whose world is already wrapped in a BVH.
"""

import logging
import random
from dataclasses import dataclass
from typing import Callable, Dict, Optional

from pathtracer.camera.camera import Camera
from pathtracer.core.utils import random_vector
from pathtracer.core.vector import Color, Point3, Vector3
from pathtracer.errors import SceneError
from pathtracer.geometry import (
    Block,
    ConstantMedium,
    Hittable,
    HittableList,
    MovingSphere,
    Quad,
    Rect,
    Rotate,
    Sphere,
    Translate,
)
from pathtracer.materials import (
    CheckerTexture,
    Dielectric,
    DiffuseLight,
    ImageTexture,
    Lambertian,
    Metal,
    NoiseTexture,
)

logger = logging.getLogger(__name__)

SKY = Color(0.70, 0.80, 1.00)
BLACK = Color(0.0, 0.0, 0.0)


@dataclass
class Scene:
    world: Hittable
    camera: Camera
    background: Color


def _finish(objects: HittableList, camera: Camera, background: Color, rng) -> Scene:
    logger.debug("Building BVH over %d top-level objects", len(objects))
    return Scene(objects.build_bvh(0.0, 1.0, rng), camera, background)


def random_spheres(aspect_ratio: float, rng, extent: int = 11) -> Scene:
    """Checkered ground, a grid of small random spheres and three large ones."""
    world = HittableList()

    checker = CheckerTexture(0.32, Color(0.2, 0.3, 0.1), Color(0.9, 0.9, 0.9))
    world.add(Sphere(Point3(0, -1000, 0), 1000, Lambertian(checker)))

    for a in range(-extent, extent + 1):
        for b in range(-extent, extent + 1):
            choose_mat = rng.random()
            center = Point3(a + 0.9 * rng.random(), 0.2, b + 0.9 * rng.random())
            if (center - Point3(4, 0.2, 0)).length() <= 0.9:
                continue

            if choose_mat < 0.8:
                # diffuse
                albedo = random_vector(rng) * random_vector(rng)
                world.add(Sphere(center, 0.2, Lambertian(albedo)))
            elif choose_mat < 0.95:
                # metal
                albedo = random_vector(rng, 0.4, 1.0)
                fuzz = rng.uniform(0, 0.5)
                center1 = center + Vector3(0, rng.uniform(0, 0.5), 0)
                world.add(MovingSphere(center, center1, 0.2, Metal(albedo, fuzz)))
            else:
                # glass
                center1 = center + Vector3(0, rng.uniform(0, 0.5), 0)
                world.add(MovingSphere(center, center1, 0.2, Dielectric(1.5)))

    world.add(Sphere(Point3(0, 1, 0), 1.0, Dielectric(1.5)))
    world.add(Sphere(Point3(-4, 1, 0), 1.0, Lambertian(Color(0.4, 0.2, 0.1))))
    world.add(Sphere(Point3(4, 1, 0), 1.0, Metal(Color(0.7, 0.6, 0.5), 0.0)))

    camera = Camera(Point3(13, 2, 3), Point3(0, 0, 0), Vector3(0, 1, 0), 20,
                    aspect_ratio, aperture=0.1, focus_dist=10.0)
    return _finish(world, camera, SKY, rng)


def two_perlin_spheres(aspect_ratio: float, rng) -> Scene:
    marble = Lambertian(NoiseTexture(4.0, rng))
    world = HittableList([
        Sphere(Point3(0, -1000, 0), 1000, marble),
        Sphere(Point3(0, 2, 0), 2, marble),
    ])
    camera = Camera(Point3(13, 2, 3), Point3(0, 0, 0), Vector3(0, 1, 0), 20,
                    aspect_ratio, focus_dist=10.0)
    return _finish(world, camera, SKY, rng)


def earth(aspect_ratio: float, rng, texture_path: str = "earth.jpg") -> Scene:
    """A globe wrapped in an image texture. Fails if the image cannot be loaded."""
    surface = Lambertian(ImageTexture(texture_path))
    world = HittableList([Sphere(Point3(0, 0, 0), 2, surface)])
    camera = Camera(Point3(0, 0, 12), Point3(0, 0, 0), Vector3(0, 1, 0), 20,
                    aspect_ratio, focus_dist=10.0)
    return _finish(world, camera, SKY, rng)


def quads(aspect_ratio: float, rng) -> Scene:
    world = HittableList([
        Quad(Point3(-3, -2, 5), Vector3(0, 0, -4), Vector3(0, 4, 0), Lambertian(Color(1.0, 0.2, 0.2))),
        Quad(Point3(-2, -2, 0), Vector3(4, 0, 0), Vector3(0, 4, 0), Lambertian(Color(0.2, 1.0, 0.2))),
        Quad(Point3(3, -2, 1), Vector3(0, 0, 4), Vector3(0, 4, 0), Lambertian(Color(0.2, 0.2, 1.0))),
        Quad(Point3(-2, 3, 1), Vector3(4, 0, 0), Vector3(0, 0, 4), Lambertian(Color(1.0, 0.5, 0.0))),
        Quad(Point3(-2, -3, 5), Vector3(4, 0, 0), Vector3(0, 0, -4), Lambertian(Color(0.2, 0.8, 0.8))),
    ])
    camera = Camera(Point3(0, 0, 9), Point3(0, 0, 0), Vector3(0, 1, 0), 80,
                    aspect_ratio, focus_dist=10.0)
    return _finish(world, camera, SKY, rng)


def simple_light(aspect_ratio: float, rng) -> Scene:
    marble = Lambertian(NoiseTexture(4.0, rng))
    light = DiffuseLight(Color(4, 4, 4))
    world = HittableList([
        Sphere(Point3(0, -1000, 0), 1000, marble),
        Sphere(Point3(0, 2, 0), 2, marble),
        Rect((3, 5), (1, 3), -2, "xy", light),
        Sphere(Point3(0, 7, 0), 2, light),
    ])
    camera = Camera(Point3(26, 3, 6), Point3(0, 2, 0), Vector3(0, 1, 0), 20,
                    aspect_ratio, focus_dist=10.0)
    return _finish(world, camera, BLACK, rng)


def _cornell_walls(light_rect: Rect):
    red = Lambertian(Color(0.65, 0.05, 0.05))
    white = Lambertian(Color(0.73, 0.73, 0.73))
    green = Lambertian(Color(0.12, 0.45, 0.15))
    walls = HittableList([
        Rect((0, 555), (0, 555), 555, "yz", green),
        Rect((0, 555), (0, 555), 0, "yz", red),
        light_rect,
        Rect((0, 555), (0, 555), 0, "xz", white),
        Rect((0, 555), (0, 555), 555, "xz", white),
        Rect((0, 555), (0, 555), 555, "xy", white),
    ])
    return walls, white


def _cornell_blocks(white):
    tall = Block(Point3(0, 0, 0), Point3(165, 330, 165), white)
    tall = Rotate(tall, 15, "y")
    tall = Translate(tall, Vector3(265, 0, 295))

    short = Block(Point3(0, 0, 0), Point3(165, 165, 165), white)
    short = Rotate(short, -18, "y")
    short = Translate(short, Vector3(130, 0, 65))
    return tall, short


def _cornell_camera(aspect_ratio: float) -> Camera:
    return Camera(Point3(278, 278, -800), Point3(278, 278, 0), Vector3(0, 1, 0), 40,
                  aspect_ratio, aperture=0.0, focus_dist=10.0)


def cornell_box(aspect_ratio: float, rng) -> Scene:
    light = DiffuseLight(Color(15, 15, 15))
    world, white = _cornell_walls(Rect((213, 343), (227, 332), 554, "xz", light))
    world.extend(_cornell_blocks(white))
    return _finish(world, _cornell_camera(aspect_ratio), BLACK, rng)


def cornell_smoke(aspect_ratio: float, rng) -> Scene:
    light = DiffuseLight(Color(7, 7, 7))
    world, white = _cornell_walls(Rect((113, 443), (127, 432), 554, "xz", light))
    tall, short = _cornell_blocks(white)
    world.add(ConstantMedium(tall, 0.01, Color(0, 0, 0)))
    world.add(ConstantMedium(short, 0.01, Color(1, 1, 1)))
    return _finish(world, _cornell_camera(aspect_ratio), BLACK, rng)


SCENES: Dict[str, Callable[..., Scene]] = {
    "random_spheres": random_spheres,
    "two_perlin_spheres": two_perlin_spheres,
    "earth": earth,
    "quads": quads,
    "simple_light": simple_light,
    "cornell_box": cornell_box,
    "cornell_smoke": cornell_smoke,
}


def build_scene(name: str, aspect_ratio: float = 1.0, rng: Optional[random.Random] = None,
                **kwargs) -> Scene:
    """Build a registered scene by name."""
    try:
        builder = SCENES[name]
    except KeyError:
        raise SceneError(f"Unknown scene {name!r}; choose from {', '.join(sorted(SCENES))}") from None
    if rng is None:
        rng = random.Random()
    logger.info("Building scene %s", name)
    return builder(aspect_ratio, rng, **kwargs)
