from pathtracer.renderer.integrator import ray_color
from pathtracer.renderer.raytracer import Renderer, render_row, row_seeds
from pathtracer.renderer.tone_mapping import gamma_correct, average_samples
from pathtracer.renderer.image_output import write_ppm, save_image

__all__ = [
    "ray_color",
    "Renderer",
    "render_row",
    "row_seeds",
    "gamma_correct",
    "average_samples",
    "write_ppm",
    "save_image",
]
