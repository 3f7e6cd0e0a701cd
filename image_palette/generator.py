# image_palette/generator.py
from __future__ import annotations

"""
Default palette-generation capability.

Median-cut quantisation (Pillow) followed by HSL target scoring:

  1) drop pixels whose alpha is below the threshold
  2) quantise the rest to at most `colours` representative colours
  3) Dominant = most populous representative
  4) for each targeted swatch, score the unused representatives that fall
     inside its lightness/saturation window and keep the best

Any callable with the same signature can stand in for generate_swatches.
"""

import colorsys
from typing import Dict, List, Optional, Tuple

import numpy as np
from PIL import Image

from .constants import (
    ALPHA_THRESHOLD,
    QUANTIZE_COLOURS,
    SWATCH_TARGETS,
    WEIGHT_LIGHTNESS,
    WEIGHT_POPULATION,
    WEIGHT_SATURATION,
    Target,
)
from .core_types import SWATCH_NAMES, PackedPixels, RGBTuple, SwatchAssignments, pack_argb

# (rgb, population, lightness, saturation)
Representative = Tuple[RGBTuple, int, float, float]


def visible_rgb(pixels: PackedPixels, alpha_threshold: int = ALPHA_THRESHOLD) -> np.ndarray:
    """uint8 (N,3) RGB rows of the packed pixels whose alpha >= alpha_threshold."""
    v = np.asarray(pixels).astype(np.int64).ravel() & 0xFFFFFFFF
    alpha = (v >> 24) & 0xFF
    keep = v[alpha >= alpha_threshold]
    rgb = np.empty((keep.size, 3), dtype=np.uint8)
    rgb[:, 0] = (keep >> 16) & 0xFF
    rgb[:, 1] = (keep >> 8) & 0xFF
    rgb[:, 2] = keep & 0xFF
    return rgb


def quantise(rgb: np.ndarray, colours: int = QUANTIZE_COLOURS) -> List[Tuple[RGBTuple, int]]:
    """
    Median-cut rgb rows down to at most `colours` entries.

    Returns [(rgb, population)] sorted by population descending.
    """
    if rgb.shape[0] == 0:
        return []
    strip = Image.fromarray(np.ascontiguousarray(rgb.reshape(1, -1, 3)))
    with strip.quantize(colors=colours, method=Image.Quantize.MEDIANCUT) as q:
        palette = q.getpalette() or []
        used = q.getcolors(maxcolors=256) or []

    merged: Dict[RGBTuple, int] = {}
    for count, idx in used:
        key: RGBTuple = (
            int(palette[3 * idx]),
            int(palette[3 * idx + 1]),
            int(palette[3 * idx + 2]),
        )
        merged[key] = merged.get(key, 0) + int(count)
    return sorted(merged.items(), key=lambda kv: (-kv[1], kv[0]))


def _representatives(quantised: List[Tuple[RGBTuple, int]]) -> List[Representative]:
    out: List[Representative] = []
    for rgb, population in quantised:
        _h, light, sat = colorsys.rgb_to_hls(rgb[0] / 255.0, rgb[1] / 255.0, rgb[2] / 255.0)
        out.append((rgb, population, light, sat))
    return out


def _within(value: float, target: Target) -> bool:
    return target[0] <= value <= target[2]


def score_representative(
    light: float,
    sat: float,
    population: int,
    max_population: int,
    light_target: Target,
    sat_target: Target,
) -> float:
    """Weighted closeness to the swatch targets plus relative population."""
    return (
        WEIGHT_SATURATION * (1.0 - abs(sat - sat_target[1]))
        + WEIGHT_LIGHTNESS * (1.0 - abs(light - light_target[1]))
        + WEIGHT_POPULATION * (population / max_population if max_population else 0.0)
    )


def select_swatches(quantised: List[Tuple[RGBTuple, int]]) -> Dict[str, Optional[RGBTuple]]:
    """Assign representatives to swatch names; unmatched swatches map to None."""
    picks: Dict[str, Optional[RGBTuple]] = {name: None for name in SWATCH_NAMES}
    reps = _representatives(quantised)
    if not reps:
        return picks

    max_population = max(r[1] for r in reps)
    picks["Dominant"] = max(reps, key=lambda r: r[1])[0]

    used: set[RGBTuple] = set()
    for name, (light_target, sat_target) in SWATCH_TARGETS.items():
        best: Optional[Representative] = None
        best_score = float("-inf")
        for rep in reps:
            rgb, population, light, sat = rep
            if rgb in used:
                continue
            if not (_within(light, light_target) and _within(sat, sat_target)):
                continue
            score = score_representative(
                light, sat, population, max_population, light_target, sat_target
            )
            if score > best_score:
                best, best_score = rep, score
        if best is not None:
            used.add(best[0])
            picks[name] = best[0]
    return picks


def generate_swatches(
    pixels: PackedPixels,
    *,
    colours: int = QUANTIZE_COLOURS,
    alpha_threshold: int = ALPHA_THRESHOLD,
) -> SwatchAssignments:
    """
    Generate the seven swatches from packed ARGB pixels.

    Raises ValueError when no pixel is opaque enough to take part.
    """
    if colours < 1 or colours > 256:
        raise ValueError(f"colours must be within 1..256, got {colours}")
    rgb = visible_rgb(pixels, alpha_threshold)
    if rgb.shape[0] == 0:
        raise ValueError("no visible pixels to build a palette from")

    picks = select_swatches(quantise(rgb, colours))
    return {
        name: (pack_argb(0xFF, *rgb_pick) if rgb_pick is not None else None)
        for name, rgb_pick in picks.items()
    }


__all__ = [
    "visible_rgb",
    "quantise",
    "score_representative",
    "select_swatches",
    "generate_swatches",
]
