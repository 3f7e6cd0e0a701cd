from __future__ import annotations

from pathlib import Path
from typing import Callable, Tuple

import pytest
from PIL import Image

from image_palette.core_types import PixelSource


@pytest.fixture
def write_image(tmp_path: Path) -> Callable[..., Path]:
    """Save a solid-colour image and return its path."""

    def _write(
        name: str = "img.png",
        size: Tuple[int, int] = (10, 10),
        colour: Tuple[int, ...] = (255, 0, 0),
        mode: str = "RGB",
    ) -> Path:
        path = tmp_path / name
        Image.new(mode, size, colour).save(path)
        return path

    return _write


@pytest.fixture
def solid_source() -> Callable[..., PixelSource]:
    def _make(
        size: Tuple[int, int] = (10, 10), colour: Tuple[int, int, int, int] = (255, 0, 0, 255)
    ) -> PixelSource:
        return PixelSource(Image.new("RGBA", size, colour))

    return _make
