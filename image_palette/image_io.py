# image_palette/image_io.py
from __future__ import annotations

import io
from pathlib import Path
from typing import Union

import numpy as np
from PIL import Image, ImageOps, UnidentifiedImageError

from .core_types import PixelSource
from .errors import DecodeError

"""
Decoder capability: encoded file on disk -> PixelSource (RGBA in sRGB).
"""

try:
    from PIL import ImageCms  # ICC conversion if profile present
except ImportError:  # pragma: no cover
    ImageCms = None  # type: ignore[assignment]


def reduce_to_8bit(im: Image.Image) -> Image.Image:
    """
    Rescale single-channel high-bit-depth images ("I;16*", "I", "F") to 8-bit "L".

    Integer samples are read as 16-bit (clipped to 0..65535, top byte kept).
    Float samples are read as 0..1 unless they exceed 1, then as 16-bit.
    Other modes pass through untouched.
    """
    if im.mode == "I" or im.mode.startswith("I;16"):
        arr = np.clip(np.asarray(im).astype(np.int64), 0, 0xFFFF) >> 8
    elif im.mode == "F":
        arr = np.nan_to_num(np.asarray(im, dtype=np.float64), nan=0.0)
        if arr.size and float(arr.max()) > 1.0:
            arr = np.clip(arr, 0.0, 65535.0) / 257.0
        else:
            arr = np.clip(arr, 0.0, 1.0) * 255.0
        arr = np.floor(arr + 0.5)
    else:
        return im
    out = Image.fromarray(arr.astype(np.uint8))
    out.info.update(im.info)
    trns = out.info.get("transparency")
    if isinstance(trns, int) and im.mode != "F":
        out.info["transparency"] = min(max(trns, 0), 0xFFFF) >> 8
    elif trns is not None:
        del out.info["transparency"]
    return out


def _convert_to_srgb_rgba(im: Image.Image) -> Image.Image:
    im = ImageOps.exif_transpose(im)
    icc_bytes = im.info.get("icc_profile")

    if icc_bytes and ImageCms is not None:
        try:
            src_prof = ImageCms.ImageCmsProfile(io.BytesIO(icc_bytes))
            dst_prof = ImageCms.createProfile("sRGB")
            im2 = ImageCms.profileToProfile(
                im,
                src_prof,
                dst_prof,
                renderingIntent=ImageCms.Intent.PERCEPTUAL,
                outputMode="RGBA",
            )
            if im2 is None:
                return im.convert("RGBA")
            return im2
        except (ImageCms.PyCMSError, OSError, ValueError):
            return im.convert("RGBA")

    return im.convert("RGBA")


def decode_image(path: Union[str, Path]) -> PixelSource:
    """
    Decode an image file into a PixelSource.

    The file handle is closed before returning; the pixel buffer lives until
    the returned source is closed.
    """
    try:
        with Image.open(path) as im0:
            im0.load()
            mode = im0.mode
            im = _convert_to_srgb_rgba(reduce_to_8bit(im0))
            im.load()
    except (UnidentifiedImageError, OSError, ValueError, Image.DecompressionBombError) as exc:
        raise DecodeError(path, str(exc)) from exc
    return PixelSource(im, mode=mode)


def describe_mode(source: PixelSource) -> str:
    """Colour format reported for diagnostics, e.g. 'RGB -> RGBA'."""
    if source.source_mode == "RGBA":
        return "RGBA"
    return f"{source.source_mode} -> RGBA"


__all__ = [
    "reduce_to_8bit",
    "decode_image",
    "describe_mode",
]
