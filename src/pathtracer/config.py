"""Configuration constants and render presets for the path tracer."""

import math
import os
from dataclasses import dataclass, replace
from typing import Optional

# Geometry tolerances
INFINITY = math.inf
T_MIN = 0.001  # lower hit bound for secondary rays, avoids shadow acne
NEAR_ZERO_EPSILON = 1e-8
PARALLEL_EPSILON = 1e-8
RECT_THICKNESS = 1e-4
MEDIUM_EXIT_OFFSET = 1e-4

# Procedural noise
PERLIN_POINT_COUNT = 256
TURBULENCE_DEPTH = 7

# Logging settings
LOG_LEVEL = os.getenv("PATHTRACER_LOG_LEVEL", "INFO")
LOG_FORMAT = os.getenv("PATHTRACER_LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s")

# Render defaults
DEFAULT_SEED = int(os.getenv("PATHTRACER_SEED", "42"))
DEFAULT_WORKERS = int(os.getenv("PATHTRACER_WORKERS", str(os.cpu_count() or 1)))
DEFAULT_WIDTH = int(os.getenv("PATHTRACER_WIDTH", "400"))

QUALITY_LEVELS = {
    "preview": {"samples_per_pixel": 10, "max_depth": 5},
    "balanced": {"samples_per_pixel": 80, "max_depth": 5},
    "final": {"samples_per_pixel": 500, "max_depth": 50},
}
DEFAULT_QUALITY = os.getenv("PATHTRACER_QUALITY", "balanced")


@dataclass(frozen=True)
class RenderSettings:
    width: int = DEFAULT_WIDTH
    aspect_ratio: float = 1.0
    samples_per_pixel: int = QUALITY_LEVELS["balanced"]["samples_per_pixel"]
    max_depth: int = QUALITY_LEVELS["balanced"]["max_depth"]
    seed: int = DEFAULT_SEED
    workers: int = DEFAULT_WORKERS

    def __post_init__(self):
        if self.width < 2:
            raise ValueError(f"width must be at least 2, got {self.width}")
        if self.aspect_ratio <= 0:
            raise ValueError(f"aspect_ratio must be positive, got {self.aspect_ratio}")
        if self.height < 2:
            raise ValueError(f"image height must be at least 2, got {self.height}")
        if self.samples_per_pixel < 1:
            raise ValueError(f"samples_per_pixel must be positive, got {self.samples_per_pixel}")
        if self.max_depth < 0:
            raise ValueError(f"max_depth must not be negative, got {self.max_depth}")
        if self.workers < 1:
            raise ValueError(f"workers must be positive, got {self.workers}")

    @property
    def height(self) -> int:
        return int(self.width / self.aspect_ratio)

    @classmethod
    def from_quality(cls, name: Optional[str] = None, **overrides) -> "RenderSettings":
        """Build settings from a named quality preset, then apply overrides."""
        name = name or DEFAULT_QUALITY
        if name not in QUALITY_LEVELS:
            raise ValueError(f"Unknown quality level {name!r}; choose from {sorted(QUALITY_LEVELS)}")
        base = cls(**QUALITY_LEVELS[name])
        overrides = {k: v for k, v in overrides.items() if v is not None}
        return replace(base, **overrides)
