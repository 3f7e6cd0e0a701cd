from __future__ import annotations

from pathlib import Path

import pytest
import numpy as np
from PIL import Image

from image_palette.errors import DecodeError, GenerationError
from image_palette.image_io import decode_image, describe_mode, reduce_to_8bit


def test_decode_reports_size_and_mode(write_image) -> None:
    path = write_image(size=(12, 7), colour=(1, 2, 3))
    with decode_image(path) as src:
        assert src.size == (12, 7)
        assert src.image.mode == "RGBA"
        assert describe_mode(src) == "RGB -> RGBA"
        assert src.pixel(0, 0) & 0xFFFFFFFF == 0xFF010203
    assert src.closed


def test_rgba_mode_description(write_image) -> None:
    path = write_image(mode="RGBA", colour=(1, 2, 3, 4))
    with decode_image(path) as src:
        assert describe_mode(src) == "RGBA"


def test_palette_image_is_converted(tmp_path: Path) -> None:
    path = tmp_path / "p.gif"
    Image.new("RGB", (5, 5), (200, 10, 10)).convert("P").save(path)
    with decode_image(path) as src:
        assert src.source_mode == "P"
        r, g, b, a = src.image.getpixel((2, 2))
        assert a == 255


def test_exif_orientation_applied(tmp_path: Path) -> None:
    path = tmp_path / "rotated.jpg"
    exif = Image.Exif()
    exif[0x0112] = 6  # rotate 90 CW on display
    Image.new("RGB", (40, 20), (0, 0, 0)).save(path, exif=exif)
    with decode_image(path) as src:
        assert src.size == (20, 40)


def test_sixteen_bit_png_is_rescaled(tmp_path: Path) -> None:
    path = tmp_path / "grey16.png"
    Image.fromarray(np.full((40, 40), 0x2000, dtype=np.uint16)).save(path)
    with decode_image(path) as src:
        assert src.source_mode.startswith("I")
        assert src.pixel(3, 3) & 0xFFFFFFFF == 0xFF202020


def test_sixteen_bit_tiff_is_rescaled(tmp_path: Path) -> None:
    path = tmp_path / "grey16.tiff"
    Image.new("I;16", (8, 8), 3000).save(path)
    with decode_image(path) as src:
        # 3000 >> 8 == 11
        assert src.pixel(0, 0) & 0xFFFFFFFF == 0xFF0B0B0B


def test_reduce_to_8bit_modes() -> None:
    assert reduce_to_8bit(Image.new("I", (2, 2), 0x4000)).getpixel((0, 0)) == 0x40
    assert reduce_to_8bit(Image.new("I", (2, 2), 70000)).getpixel((0, 0)) == 0xFF
    assert reduce_to_8bit(Image.new("F", (2, 2), 1.0)).getpixel((1, 1)) == 255
    assert reduce_to_8bit(Image.new("F", (2, 2), 0.2)).getpixel((1, 1)) == 51
    rgb = Image.new("RGB", (2, 2), (1, 2, 3))
    assert reduce_to_8bit(rgb) is rgb


def test_undecodable_file(tmp_path: Path) -> None:
    path = tmp_path / "text.png"
    path.write_text("hello", encoding="utf-8")
    with pytest.raises(DecodeError) as info:
        decode_image(path)
    assert isinstance(info.value, GenerationError)
    assert info.value.path == path


def test_closed_source_rejects_access(write_image) -> None:
    src = decode_image(write_image())
    src.close()
    src.close()
    with pytest.raises(ValueError):
        src.rgba_array()
