# renderer/raytracer.py
import logging
import random
import time
from concurrent.futures import ProcessPoolExecutor
from typing import List, Optional

import numpy as np

from pathtracer.camera.camera import Camera
from pathtracer.config import RenderSettings
from pathtracer.core.vector import Color
from pathtracer.geometry.hittable import Hittable
from pathtracer.renderer.integrator import ray_color
from pathtracer.renderer.tone_mapping import average_samples

logger = logging.getLogger(__name__)

# Scene shared by every row rendered inside a worker process.
_worker_scene = None


def row_seeds(seed: int, height: int) -> List[int]:
    """
    One independent seed per image row, split from the master seed, so the
    picture does not depend on how rows are distributed over workers.
    """
    children = np.random.SeedSequence(seed).spawn(height)
    return [int(child.generate_state(1, dtype=np.uint64)[0]) for child in children]


def render_row(world: Hittable, camera: Camera, background: Color,
               settings: RenderSettings, j: int, seed: int) -> np.ndarray:
    """
    Accumulate `samples_per_pixel` jittered samples for every pixel of
    scanline `j` (counted from the bottom of the image).
    """
    rng = random.Random(seed)
    width = settings.width
    height = settings.height
    row = np.zeros((width, 3), dtype=np.float64)

    for i in range(width):
        r = g = b = 0.0
        for _ in range(settings.samples_per_pixel):
            u = (i + rng.random()) / (width - 1)
            v = (j + rng.random()) / (height - 1)
            ray = camera.get_ray(u, v, rng)
            color = ray_color(ray, background, world, settings.max_depth, rng)
            r += color.x
            g += color.y
            b += color.z
        row[i] = (r, g, b)

    return average_samples(row, settings.samples_per_pixel)


def _init_worker(world, camera, background, settings):
    global _worker_scene
    _worker_scene = (world, camera, background, settings)


def _render_row_in_worker(j: int, seed: int):
    world, camera, background, settings = _worker_scene
    return j, render_row(world, camera, background, settings, j, seed)


class Renderer:
    """
    Offline path tracing driver.

    Splits the image into scanlines and renders them either in-process
    (workers == 1) or over a process pool. The scene is read-only while
    rendering, so each worker receives one copy through the pool initializer.
    """
    def __init__(self, settings: Optional[RenderSettings] = None):
        self.settings = settings or RenderSettings()

    @property
    def width(self) -> int:
        return self.settings.width

    @property
    def height(self) -> int:
        return self.settings.height

    def render(self, world: Hittable, camera: Camera, background: Color) -> np.ndarray:
        """
        Render the scene and return the averaged linear radiance image of
        shape (height, width, 3); row 0 is the top of the picture.
        """
        settings = self.settings
        height = settings.height
        image = np.zeros((height, settings.width, 3), dtype=np.float64)
        seeds = row_seeds(settings.seed, height)
        # Top scanline first, like the PPM output order.
        rows = list(range(height - 1, -1, -1))

        logger.info("Rendering %dx%d, %d samples/pixel, max depth %d, %d worker(s)",
                    settings.width, height, settings.samples_per_pixel,
                    settings.max_depth, settings.workers)
        start = time.perf_counter()

        if settings.workers == 1:
            for done, j in enumerate(rows, start=1):
                image[height - 1 - j] = render_row(world, camera, background, settings, j, seeds[j])
                self._report_progress(height - done)
        else:
            with ProcessPoolExecutor(max_workers=settings.workers,
                                     initializer=_init_worker,
                                     initargs=(world, camera, background, settings)) as executor:
                chunksize = max(1, height // (settings.workers * 8))
                results = executor.map(_render_row_in_worker, rows, [seeds[j] for j in rows],
                                       chunksize=chunksize)
                for done, (j, row) in enumerate(results, start=1):
                    image[height - 1 - j] = row
                    self._report_progress(height - done)

        logger.info("Done in %.2fs", time.perf_counter() - start)
        return image

    def _report_progress(self, remaining: int):
        height = self.settings.height
        step = max(1, height // 10)
        if remaining % step == 0 or remaining == 0:
            logger.info("Scanlines remaining: %d", remaining)
        else:
            logger.debug("Scanlines remaining: %d", remaining)
