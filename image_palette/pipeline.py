# image_palette/pipeline.py
from __future__ import annotations

"""
End-to-end palette extraction for one image path.

  resolve -> exists? -> decode -> downscale -> extract -> generate -> represent

Each call owns its images; nothing is shared between calls.
"""

import numbers
from contextlib import ExitStack
from pathlib import Path
from typing import Union

from .constants import DEFAULT_MAX_WIDTH, DEFAULT_RESAMPLE, MAX_MAX_WIDTH, MIN_MAX_WIDTH
from .core_types import Decoder, DiagnosticSink, PaletteGenerator, emit
from .errors import GenerationError, ImageNotFoundError, PaletteError
from .generator import generate_swatches
from .image_io import decode_image, describe_mode
from .orchestrator import build_swatches
from .pixels import extract_pixels
from .scaling import scale_image
from .swatches import Palette


def validate_max_width(max_width: int) -> int:
    """Return max_width as int if it is an integer in [MIN_MAX_WIDTH, MAX_MAX_WIDTH]."""
    if isinstance(max_width, bool) or not isinstance(max_width, numbers.Integral):
        raise ValueError(f"max width must be an integer, got {max_width!r}")
    value = int(max_width)
    if not (MIN_MAX_WIDTH <= value <= MAX_MAX_WIDTH):
        raise ValueError(
            f"max width must be within {MIN_MAX_WIDTH}..{MAX_MAX_WIDTH}, got {value}"
        )
    return value


def resolve_path(path: Union[str, Path]) -> Path:
    """Expand '~' and make absolute. The file does not have to exist."""
    return Path(path).expanduser().resolve()


def get_image_palette(
    path: Union[str, Path],
    max_width: int = DEFAULT_MAX_WIDTH,
    *,
    decoder: Decoder = decode_image,
    generator: PaletteGenerator = generate_swatches,
    resample: str = DEFAULT_RESAMPLE,
    sink: DiagnosticSink = None,
) -> Palette:
    """
    Extract the seven-swatch Palette from the image at path.

    Raises:
      ValueError: max_width out of range.
      ImageNotFoundError: path is not an existing file; nothing is decoded.
      GenerationError: decode, scale, extract or generate failed. The
        original exception is chained.
    """
    max_width = validate_max_width(max_width)
    emit(sink, f"Starting palette generation for path: {path}")
    emit(sink, f"Using MaxWidth: {max_width} pixels")

    resolved = resolve_path(path)
    emit(sink, f"Resolved path: {resolved}")
    if not resolved.is_file():
        raise ImageNotFoundError(resolved)

    try:
        with ExitStack() as stack:
            emit(sink, f"Loading image from path: {resolved}")
            original = stack.enter_context(decoder(resolved))
            emit(
                sink,
                f"Image loaded successfully. Dimensions: {original.width}x{original.height}, "
                f"ColorType: {describe_mode(original)}",
            )

            scaled = scale_image(original, max_width, resample=resample, sink=sink)
            if scaled is not original:
                stack.enter_context(scaled)

            pixels = extract_pixels(scaled, sink=sink)
            emit(sink, "Releasing image buffers")

        assignments = build_swatches(pixels, generator, sink=sink)
        palette = Palette.from_assignments(assignments)
    except PaletteError:
        raise
    except Exception as exc:
        raise GenerationError(resolved, f"{type(exc).__name__}: {exc}") from exc

    emit(sink, "Palette generation complete")
    return palette


__all__ = ["validate_max_width", "resolve_path", "get_image_palette"]
