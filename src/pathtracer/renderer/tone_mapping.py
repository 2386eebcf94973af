# renderer/tone_mapping.py
import numpy as np


def gamma_correct(image: np.ndarray) -> np.ndarray:
    """
    Convert a linear radiance image to 8-bit with gamma 2 (square root).

    Values are clamped to [0, 0.999] before scaling by 256, so 1.0 maps to 255.
    NaNs from degenerate geometry are treated as black.
    """
    linear = np.nan_to_num(np.asarray(image, dtype=np.float64), nan=0.0, posinf=1.0, neginf=0.0)
    mapped = np.sqrt(np.maximum(linear, 0.0))
    output = (256.0 * np.clip(mapped, 0.0, 0.999)).astype(np.uint8)
    return output


def average_samples(accumulated: np.ndarray, samples_per_pixel: int) -> np.ndarray:
    """
    Average an accumulation buffer over the number of samples per pixel.
    """
    return np.asarray(accumulated, dtype=np.float64) / float(samples_per_pixel)
