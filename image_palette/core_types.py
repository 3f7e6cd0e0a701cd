# image_palette/core_types.py
from __future__ import annotations

"""
Core type aliases, the packed-colour layout, and the PixelSource value object.
"""

from pathlib import Path
from typing import Callable, Dict, Mapping, Optional, Tuple

import numpy as np
from numpy.typing import NDArray
from PIL import Image

# Basic aliases

ARGBTuple = Tuple[int, int, int, int]
RGBTuple = Tuple[int, int, int]
HexStr = str

U8Image = NDArray[np.uint8]  # (H, W, 4) RGBA
PackedPixels = NDArray[np.int32]  # (N,) row-major ARGB

SwatchAssignments = Dict[str, Optional[int]]
DiagnosticSink = Optional[Callable[[str], None]]

# Swatch names in display order

SWATCH_NAMES: Tuple[str, ...] = (
    "Vibrant",
    "LightVibrant",
    "DarkVibrant",
    "Muted",
    "LightMuted",
    "DarkMuted",
    "Dominant",
)


# Packed ARGB helpers


def to_int32(value: int) -> int:
    """Reinterpret the low 32 bits of value as a signed 32-bit int."""
    v = int(value) & 0xFFFFFFFF
    return v - 0x1_0000_0000 if v & 0x8000_0000 else v


def pack_argb(a: int, r: int, g: int, b: int) -> int:
    """Pack four 8-bit channels into a signed 32-bit ARGB value."""
    return to_int32(
        ((int(a) & 0xFF) << 24)
        | ((int(r) & 0xFF) << 16)
        | ((int(g) & 0xFF) << 8)
        | (int(b) & 0xFF)
    )


def unpack_argb(value: int) -> ARGBTuple:
    """Split a signed or unsigned 32-bit ARGB value into (a, r, g, b)."""
    v = int(value) & 0xFFFFFFFF
    return ((v >> 24) & 0xFF, (v >> 16) & 0xFF, (v >> 8) & 0xFF, v & 0xFF)


def emit(sink: DiagnosticSink, message: str) -> None:
    """Write to the diagnostic sink if one was given."""
    if sink is not None:
        sink(message)


# Value objects


class PixelSource:
    """
    Decoded image: dimensions plus row-major RGBA samples.

    Wraps a Pillow image in RGBA mode. Never mutated after construction;
    close() releases the underlying buffer and may be called more than once.
    """

    def __init__(self, image: Image.Image, mode: Optional[str] = None) -> None:
        if image.mode != "RGBA":
            image = image.convert("RGBA")
        self._image: Optional[Image.Image] = image
        self.source_mode = mode or image.mode
        self.width, self.height = image.size

    @classmethod
    def from_rgba(cls, rgba: np.ndarray) -> "PixelSource":
        """Build a source from a uint8 (H,W,4) array."""
        arr = np.ascontiguousarray(rgba, dtype=np.uint8)
        if arr.ndim != 3 or arr.shape[-1] != 4:
            raise TypeError("expected uint8 (H,W,4) array")
        return cls(Image.fromarray(arr))

    @property
    def image(self) -> Image.Image:
        if self._image is None:
            raise ValueError("pixel source is closed")
        return self._image

    @property
    def closed(self) -> bool:
        return self._image is None

    @property
    def size(self) -> Tuple[int, int]:
        return self.width, self.height

    def rgba_array(self) -> U8Image:
        """Copy of the samples as uint8 (H,W,4) in R, G, B, A channel order."""
        return np.array(self.image, dtype=np.uint8).reshape(self.height, self.width, 4)

    def pixel(self, x: int, y: int) -> int:
        """Packed ARGB value at column x, row y."""
        r, g, b, a = self.image.getpixel((x, y))
        return pack_argb(a, r, g, b)

    def close(self) -> None:
        if self._image is not None:
            self._image.close()
            self._image = None

    def __enter__(self) -> "PixelSource":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def __repr__(self) -> str:
        state = "closed" if self.closed else self.source_mode
        return f"PixelSource({self.width}x{self.height}, {state})"


# Capability signatures

Decoder = Callable[[Path], PixelSource]
PaletteGenerator = Callable[[PackedPixels], Mapping[str, Optional[int]]]

__all__ = [
    # aliases / types
    "ARGBTuple",
    "RGBTuple",
    "HexStr",
    "U8Image",
    "PackedPixels",
    "SwatchAssignments",
    "DiagnosticSink",
    "SWATCH_NAMES",
    # helpers
    "to_int32",
    "pack_argb",
    "unpack_argb",
    "emit",
    # value objects
    "PixelSource",
    # callable signatures
    "Decoder",
    "PaletteGenerator",
]
