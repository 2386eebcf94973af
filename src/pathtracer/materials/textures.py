# materials/textures.py
import math
from typing import Optional, Union

import numpy as np

from pathtracer.config import TURBULENCE_DEPTH
from pathtracer.core.vector import Color, Vector3
from pathtracer.materials.perlin import Perlin
from pathtracer.materials.texture_loader import load_image

COLOR_SCALE = 1.0 / 255.0


class Texture:
    """Base class for all textures."""
    def value(self, u: float, v: float, p: Vector3) -> Color:
        """Color of the texture at surface coordinates (u, v) and point p."""
        raise NotImplementedError("value() must be implemented by texture subclasses.")


class SolidTexture(Texture):
    """A solid color texture."""
    def __init__(self, color: Union[Vector3, float], g: Optional[float] = None,
                 b: Optional[float] = None):
        if isinstance(color, Vector3):
            self.color = color
        else:
            self.color = Color(color, g, b)

    def value(self, u: float, v: float, p: Vector3) -> Color:
        return self.color


def as_texture(value: Union[Vector3, Texture]) -> Texture:
    """Wrap a plain color in a SolidTexture; textures pass through."""
    return SolidTexture(value) if isinstance(value, Vector3) else value


class CheckerTexture(Texture):
    """
    A solid (spatial) 3D checker pattern.

    The pattern depends only on the point, so objects look as if they were
    carved out of a checkered block. floor() is used rather than truncation
    so the cells on both sides of zero alternate correctly.
    """
    def __init__(self, scale: float, even: Union[Vector3, Texture], odd: Union[Vector3, Texture]):
        self.scale = scale
        self.even = as_texture(even)
        self.odd = as_texture(odd)

    def value(self, u: float, v: float, p: Vector3) -> Color:
        x = math.floor(self.scale * p.x)
        y = math.floor(self.scale * p.y)
        z = math.floor(self.scale * p.z)
        if (x + y + z) % 2 == 0:
            return self.even.value(u, v, p)
        return self.odd.value(u, v, p)


class ImageTexture(Texture):
    """A texture from an image file, stored as a height x width x 3 uint8 array."""
    def __init__(self, image_path):
        self.path = str(image_path)
        self._set_pixels(load_image(image_path))

    @classmethod
    def from_array(cls, pixels: np.ndarray) -> "ImageTexture":
        """Build a texture from an in-memory RGB array."""
        texture = cls.__new__(cls)
        texture.path = None
        texture._set_pixels(np.asarray(pixels, dtype=np.uint8))
        return texture

    def _set_pixels(self, data: np.ndarray):
        if data.ndim != 3 or data.shape[2] != 3 or data.shape[0] == 0 or data.shape[1] == 0:
            raise ValueError(f"Expected a non-empty height x width x 3 array, got shape {data.shape}")
        self.data = data
        self.height, self.width = data.shape[:2]

    def value(self, u: float, v: float, p: Vector3) -> Color:
        # Clamp input texture coordinates to [0,1] x [1,0]
        u = min(max(u, 0.0), 1.0)
        v = 1.0 - min(max(v, 0.0), 1.0)  # Flip V to image coordinates

        # u = 1.0 and v = 0.0 land one past the edge; clamp to the last pixel.
        i = min(int(u * self.width), self.width - 1)
        j = min(int(v * self.height), self.height - 1)

        pixel = self.data[j, i]
        return Color(pixel[0] * COLOR_SCALE, pixel[1] * COLOR_SCALE, pixel[2] * COLOR_SCALE)


class NoiseTexture(Texture):
    """
    Marble-like procedural texture: turbulence shifts the phase of a sine
    along z so the stripes undulate.
    """
    def __init__(self, scale: float = 1.0, rng=None):
        self.scale = scale
        self.noise = Perlin(rng)

    def value(self, u: float, v: float, p: Vector3) -> Color:
        s = p * self.scale
        gray = 0.5 * (1.0 + math.sin(s.z + 10.0 * self.noise.turb(s, TURBULENCE_DEPTH)))
        return Color(gray, gray, gray)
