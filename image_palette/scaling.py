# image_palette/scaling.py
from __future__ import annotations

"""
Downscaler.

Computes a target size from a maximum width and resizes with Pillow.
Never upscales; keeps the aspect ratio. A failed resize hands back the
original source unchanged.

Exports:
  compute_scale(width, max_width) -> float
  round_half_away(x) -> int
  target_size(width, height, max_width) -> Optional[(w, h)]
  pillow_resample_from_name(name) -> Image.Resampling
  scale_image(source, max_width, *, resample, sink) -> PixelSource
"""

import math
from typing import Optional, Tuple

from PIL import Image

from .constants import DEFAULT_RESAMPLE
from .core_types import DiagnosticSink, PixelSource, emit


def compute_scale(width: int, max_width: int) -> float:
    """Scale factor max_width / width."""
    if width <= 0:
        raise ValueError(f"image width must be positive, got {width}")
    return float(max_width) / float(width)


def round_half_away(x: float) -> int:
    """Round to nearest int, ties away from zero (2.5 -> 3, -2.5 -> -3)."""
    return int(math.copysign(math.floor(abs(x) + 0.5), x))


def target_size(width: int, height: int, max_width: int) -> Optional[Tuple[int, int]]:
    """
    Target (w, h) for a downscale, or None when the image already fits.

    The new width is max_width exactly; the height keeps the aspect ratio.
    """
    scale = compute_scale(width, max_width)
    if scale >= 1.0:
        return None
    return int(max_width), round_half_away(height * scale)


def pillow_resample_from_name(name: str) -> Image.Resampling:
    """Map a string to a Pillow resampling filter enum."""
    if name == "nearest":
        return Image.Resampling.NEAREST
    if name == "bilinear":
        return Image.Resampling.BILINEAR
    if name == "bicubic":
        return Image.Resampling.BICUBIC
    if name == "lanczos":
        return Image.Resampling.LANCZOS
    raise ValueError(f"unknown resample filter: {name!r}")


def scale_image(
    source: PixelSource,
    max_width: int,
    *,
    resample: str = DEFAULT_RESAMPLE,
    sink: DiagnosticSink = None,
) -> PixelSource:
    """
    Downscale source so its width is at most max_width.

    Returns source itself when no scaling is needed or when the resize fails.
    Otherwise returns a new PixelSource owned by the caller.
    """
    filt = pillow_resample_from_name(resample)
    scale = compute_scale(source.width, max_width)
    emit(sink, f"Scale factor: {scale:.3f}")

    size = target_size(source.width, source.height, max_width)
    if size is None:
        emit(sink, "No scaling needed: image width is within the target width")
        return source

    new_w, new_h = size
    emit(
        sink,
        f"Scaling image to {new_w}x{new_h} "
        f"(reduction from {source.width * source.height:,} to {new_w * new_h:,} pixels)",
    )
    try:
        resized = source.image.resize((new_w, new_h), resample=filt)
    except Exception as exc:
        emit(sink, f"Scaling failed ({exc}); falling back to original image")
        return source
    if resized.size != (new_w, new_h):
        resized.close()
        emit(sink, "Scaling failed (unexpected output size); falling back to original image")
        return source

    emit(sink, f"Image scaled successfully to {new_w}x{new_h}")
    return PixelSource(resized, mode=source.source_mode)


__all__ = [
    "compute_scale",
    "round_half_away",
    "target_size",
    "pillow_resample_from_name",
    "scale_image",
]
