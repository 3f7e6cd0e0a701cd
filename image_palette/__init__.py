# image_palette/__init__.py
"""
image_palette package.

Purpose:
  Pull seven representative swatches out of an image for theming or terminal
  display. See get_image_palette.py for the CLI.

Public API:
  get_image_palette : path -> Palette, end to end.
  Palette, ColorInfo: the seven-swatch result and its int/hex colour values.
  decode_image      : default decoder (Pillow).
  scale_image       : width-capped downscale, never upscales.
  extract_pixels    : PixelSource -> packed ARGB int32 array.
  build_swatches    : run a generator, repackage into the seven names.
  generate_swatches : default generator (median cut + HSL targets).
  errors            : PaletteError, ImageNotFoundError, GenerationError, DecodeError.

Quick start:
  from image_palette import get_image_palette
  print(get_image_palette("photo.jpg", max_width=300))
"""

__version__ = "0.1.0"

from . import constants
from . import core_types
from . import errors
from . import utils

from .core_types import SWATCH_NAMES, PixelSource, pack_argb, unpack_argb
from .errors import DecodeError, GenerationError, ImageNotFoundError, PaletteError
from .generator import generate_swatches
from .image_io import decode_image
from .orchestrator import build_swatches
from .pipeline import get_image_palette, resolve_path, validate_max_width
from .pixels import extract_pixels
from .scaling import scale_image, target_size
from .swatches import ColorInfo, Palette

__all__ = [
    "__version__",
    "constants",
    "core_types",
    "errors",
    "utils",
    "SWATCH_NAMES",
    "PixelSource",
    "pack_argb",
    "unpack_argb",
    "PaletteError",
    "ImageNotFoundError",
    "GenerationError",
    "DecodeError",
    "generate_swatches",
    "decode_image",
    "build_swatches",
    "get_image_palette",
    "resolve_path",
    "validate_max_width",
    "extract_pixels",
    "scale_image",
    "target_size",
    "ColorInfo",
    "Palette",
]
