from __future__ import annotations

import re

import pytest

from image_palette.core_types import SWATCH_NAMES, pack_argb
from image_palette.swatches import ANSI_RESET, ColorInfo, Palette

ESC = "\x1b"


@pytest.mark.parametrize(
    "value", [0, 1, 0x7FFFFFFF, -1, -16777216, pack_argb(0xFF, 0x12, 0xAB, 0x0C), 0xFF00FF00]
)
def test_hex_round_trips(value: int) -> None:
    info = ColorInfo(value)
    assert re.fullmatch(r"#[0-9A-F]{8}", info.hex_value)
    assert int(info.hex_value[1:], 16) == value & 0xFFFFFFFF


def test_hex_is_uppercase_and_zero_padded() -> None:
    assert ColorInfo(0x00000A0B).hex_value == "#00000A0B"
    assert ColorInfo(pack_argb(0xFF, 0xAB, 0xCD, 0xEF)).hex_value == "#FFABCDEF"


def test_absent_colour() -> None:
    info = ColorInfo(None)
    assert info.hex_value is None
    assert info.rgb is None
    assert str(info) == "null"
    assert info.render(colour=False) == "null"
    assert info.to_dict() == {"int": None, "hex": None}


def test_rendering_uses_rgb_bits() -> None:
    info = ColorInfo(pack_argb(0x80, 12, 200, 255))
    text = str(info)
    assert text.startswith(f"{ESC}[38;2;")
    assert text.endswith(f"{ESC}[0m")
    assert text == f"{ESC}[38;2;12;200;255m#800CC8FF{ANSI_RESET}"


def test_plain_rendering_has_no_escapes() -> None:
    assert ColorInfo(pack_argb(255, 1, 2, 3)).render(colour=False) == "#FF010203"


def test_unsigned_input_is_normalised() -> None:
    assert ColorInfo(0xFF000000).int_value == -16777216


def test_palette_text_order_and_nulls() -> None:
    red = pack_argb(255, 255, 0, 0)
    palette = Palette.from_assignments({"Dominant": red})
    lines = str(palette).split("\n")
    assert [line.split(":")[0] for line in lines] == list(SWATCH_NAMES)
    assert lines[:6] == [f"{name}: null" for name in SWATCH_NAMES[:6]]
    assert lines[6] == f"Dominant: {ESC}[38;2;255;0;0m#FFFF0000{ESC}[0m"


def test_palette_access() -> None:
    palette = Palette.from_assignments({"Muted": 0x11223344})
    assert palette["Muted"].hex_value == "#11223344"
    assert palette.Muted is palette["Muted"]
    assert palette["Vibrant"].present is False
    with pytest.raises(KeyError):
        palette["Accent"]
    assert [name for name, _ in palette.items()] == list(SWATCH_NAMES)


def test_palette_rejects_unknown_names() -> None:
    with pytest.raises(ValueError):
        Palette.from_assignments({"Accent": 1})


def test_palette_is_immutable() -> None:
    palette = Palette()
    with pytest.raises(AttributeError):
        palette.Vibrant = ColorInfo(1)  # type: ignore[misc]


def test_palette_to_dict() -> None:
    palette = Palette.from_assignments({"Vibrant": pack_argb(255, 0, 0, 1)})
    data = palette.to_dict()
    assert list(data) == list(SWATCH_NAMES)
    assert data["Vibrant"] == {"int": pack_argb(255, 0, 0, 1), "hex": "#FF000001"}
    assert data["Dominant"] == {"int": None, "hex": None}
