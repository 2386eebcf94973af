# renderer/image_output.py
import logging
from pathlib import Path
from typing import TextIO

import numpy as np
from PIL import Image

logger = logging.getLogger(__name__)


def write_ppm(image: np.ndarray, stream: TextIO) -> None:
    """
    Write an 8-bit RGB image as plain-text PPM (P3), top row first,
    one "R G B" line per pixel.
    """
    height, width = image.shape[:2]
    stream.write("P3\n")
    stream.write(f"{width} {height}\n")
    stream.write("255\n")
    for row in image:
        stream.write("".join(f"{r} {g} {b}\n" for r, g, b in row.tolist()))


def save_image(image: np.ndarray, path) -> Path:
    """
    Save an 8-bit RGB image. ``.ppm`` files are written as plain-text PPM,
    any other extension goes through Pillow.
    """
    path = Path(path)
    if path.parent != Path(""):
        path.parent.mkdir(parents=True, exist_ok=True)
    if path.suffix.lower() == ".ppm":
        with open(path, "w", encoding="ascii") as f:
            write_ppm(image, f)
    else:
        Image.fromarray(np.ascontiguousarray(image, dtype=np.uint8)).save(path)
    logger.info("Wrote %dx%d image to %s", image.shape[1], image.shape[0], path)
    return path
