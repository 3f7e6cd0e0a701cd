# image_palette/pixels.py
from __future__ import annotations

"""
PixelExtractor: PixelSource -> flat row-major sequence of packed ARGB ints.

Channels are read by name from the RGBA array and shifted into place, so the
result does not depend on how the decoder lays samples out in memory.
"""

import numpy as np

from .core_types import DiagnosticSink, PackedPixels, PixelSource, U8Image, emit


def pack_rgba_array(rgba: U8Image) -> PackedPixels:
    """
    Pack a uint8 (H,W,4) RGBA array into int32 ARGB, row-major.

    Bits 31-24 alpha, 23-16 red, 15-8 green, 7-0 blue.
    """
    flat = np.asarray(rgba, dtype=np.uint8).reshape(-1, 4)
    r = flat[:, 0].astype(np.uint32)
    g = flat[:, 1].astype(np.uint32)
    b = flat[:, 2].astype(np.uint32)
    a = flat[:, 3].astype(np.uint32)
    packed = (a << np.uint32(24)) | (r << np.uint32(16)) | (g << np.uint32(8)) | b
    return packed.view(np.int32)


def extract_pixels(source: PixelSource, *, sink: DiagnosticSink = None) -> PackedPixels:
    """Flatten source into width*height packed pixels (row 0 left to right, then row 1, ...)."""
    emit(sink, f"Converting bitmap to pixel array. Bitmap size: {source.width}x{source.height}")
    pixels = pack_rgba_array(source.rgba_array())
    emit(sink, f"Extracted {pixels.size:,} pixels")
    return pixels


__all__ = ["pack_rgba_array", "extract_pixels"]
