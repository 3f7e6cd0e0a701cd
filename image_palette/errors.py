# image_palette/errors.py
from __future__ import annotations

"""
Error kinds raised by the palette pipeline.

  PaletteError          base, carries the resolved path
  ImageNotFoundError    input path is not an existing file (raised before decode)
  GenerationError       anything failing after the existence check
  DecodeError           the decoder could not read the file
"""

from pathlib import Path
from typing import Optional, Union

PathLike = Union[str, Path]


class PaletteError(Exception):
    """Base error; `path` is the image the failure refers to."""

    def __init__(self, message: str, path: Optional[PathLike] = None) -> None:
        super().__init__(message)
        self.path = Path(path) if path is not None else None


class ImageNotFoundError(PaletteError, FileNotFoundError):
    def __init__(self, path: PathLike) -> None:
        PaletteError.__init__(self, f"File not found: {path}", path)


class GenerationError(PaletteError):
    """Palette generation failed; the original exception is chained as __cause__."""

    def __init__(self, path: PathLike, reason: Optional[str] = None) -> None:
        message = f"Palette generation failed for {path}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message, path)


class DecodeError(GenerationError):
    def __init__(self, path: PathLike, reason: Optional[str] = None) -> None:
        PaletteError.__init__(
            self,
            f"Unable to decode image at path: {path}" + (f" ({reason})" if reason else ""),
            path,
        )


__all__ = [
    "PaletteError",
    "ImageNotFoundError",
    "GenerationError",
    "DecodeError",
]
