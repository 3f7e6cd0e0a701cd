# image_palette/constants.py
"""
Defaults and tunables used across the project.

- Downscaling limits (DEFAULT_MAX_WIDTH, MIN_MAX_WIDTH, MAX_MAX_WIDTH)
- Resample filter names
- Default generator knobs (quantisation size, alpha cut-off, swatch targets, weights)
"""
from __future__ import annotations

from typing import Dict, Tuple

# =========================
# Downscaling
# =========================
DEFAULT_MAX_WIDTH: int = 200
MIN_MAX_WIDTH: int = 50
MAX_MAX_WIDTH: int = 2000

DEFAULT_RESAMPLE: str = "nearest"
RESAMPLE_NAMES: Tuple[str, ...] = ("nearest", "bilinear", "bicubic", "lanczos")

# =========================
# Default generator
# =========================
QUANTIZE_COLOURS: int = 16
ALPHA_THRESHOLD: int = 128

# (min, target, max) in HSL space, 0..1
Target = Tuple[float, float, float]

LIGHTNESS_LIGHT: Target = (0.55, 0.74, 1.0)
LIGHTNESS_NORMAL: Target = (0.30, 0.50, 0.70)
LIGHTNESS_DARK: Target = (0.0, 0.26, 0.45)

SATURATION_VIBRANT: Target = (0.35, 1.0, 1.0)
SATURATION_MUTED: Target = (0.0, 0.30, 0.40)

# Swatch -> (lightness, saturation). Dict order is the selection order;
# each quantised colour is claimed by at most one swatch.
SWATCH_TARGETS: Dict[str, Tuple[Target, Target]] = {
    "LightVibrant": (LIGHTNESS_LIGHT, SATURATION_VIBRANT),
    "Vibrant": (LIGHTNESS_NORMAL, SATURATION_VIBRANT),
    "DarkVibrant": (LIGHTNESS_DARK, SATURATION_VIBRANT),
    "LightMuted": (LIGHTNESS_LIGHT, SATURATION_MUTED),
    "Muted": (LIGHTNESS_NORMAL, SATURATION_MUTED),
    "DarkMuted": (LIGHTNESS_DARK, SATURATION_MUTED),
}

WEIGHT_SATURATION: float = 0.24
WEIGHT_LIGHTNESS: float = 0.52
WEIGHT_POPULATION: float = 0.24

__all__ = [
    "DEFAULT_MAX_WIDTH",
    "MIN_MAX_WIDTH",
    "MAX_MAX_WIDTH",
    "DEFAULT_RESAMPLE",
    "RESAMPLE_NAMES",
    "QUANTIZE_COLOURS",
    "ALPHA_THRESHOLD",
    "Target",
    "LIGHTNESS_LIGHT",
    "LIGHTNESS_NORMAL",
    "LIGHTNESS_DARK",
    "SATURATION_VIBRANT",
    "SATURATION_MUTED",
    "SWATCH_TARGETS",
    "WEIGHT_SATURATION",
    "WEIGHT_LIGHTNESS",
    "WEIGHT_POPULATION",
]
