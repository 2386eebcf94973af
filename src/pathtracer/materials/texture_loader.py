# materials/texture_loader.py
import logging
import os

import numpy as np
from PIL import Image, UnidentifiedImageError

from pathtracer.errors import TextureLoadError

logger = logging.getLogger(__name__)


def load_image(image_path) -> np.ndarray:
    """
    Decode an image file into an RGB pixel array.

    Args:
        image_path: Path to the image file

    Returns:
        uint8 array of shape (height, width, 3)

    Raises:
        TextureLoadError: If the file is missing or cannot be decoded
    """
    if not os.path.exists(image_path):
        raise TextureLoadError(image_path, "file not found")

    try:
        with Image.open(image_path) as img:
            # Convert to RGB if necessary
            if img.mode != 'RGB':
                img = img.convert('RGB')
            data = np.array(img, dtype=np.uint8)
    except (OSError, UnidentifiedImageError, ValueError) as e:
        raise TextureLoadError(image_path, e) from e

    logger.debug("Loaded texture %s (%dx%d)", image_path, data.shape[1], data.shape[0])
    return data
