# image_palette/swatches.py
from __future__ import annotations

"""
Representation layer: ColorInfo (packed int + hex) and the seven-swatch Palette.

ColorInfo renders as a 24-bit ANSI foreground escape wrapping its hex string,
or the literal "null" when no colour was found for the swatch.
"""

from dataclasses import dataclass, fields
from typing import Dict, Iterator, Mapping, Optional, Tuple

from .core_types import SWATCH_NAMES, HexStr, RGBTuple, to_int32, unpack_argb

ANSI_RESET = "\x1b[0m"


def ansi_foreground(r: int, g: int, b: int) -> str:
    """True-colour foreground escape, e.g. ESC[38;2;255;0;0m."""
    return f"\x1b[38;2;{r};{g};{b}m"


@dataclass(frozen=True)
class ColorInfo:
    """A swatch colour as both a packed ARGB int and '#AARRGGBB' hex."""

    int_value: Optional[int] = None

    def __post_init__(self) -> None:
        if self.int_value is not None:
            object.__setattr__(self, "int_value", to_int32(self.int_value))

    @classmethod
    def from_packed(cls, packed: Optional[int]) -> "ColorInfo":
        return cls(packed)

    @property
    def present(self) -> bool:
        return self.int_value is not None

    @property
    def hex_value(self) -> Optional[HexStr]:
        if self.int_value is None:
            return None
        return f"#{self.int_value & 0xFFFFFFFF:08X}"

    @property
    def rgb(self) -> Optional[RGBTuple]:
        if self.int_value is None:
            return None
        _a, r, g, b = unpack_argb(self.int_value)
        return r, g, b

    def render(self, colour: bool = True) -> str:
        """Terminal form; colour=False drops the escape codes."""
        if self.int_value is None:
            return "null"
        hex_value = self.hex_value
        if not colour:
            return hex_value
        r, g, b = self.rgb
        return f"{ansi_foreground(r, g, b)}{hex_value}{ANSI_RESET}"

    def to_dict(self) -> Dict[str, object]:
        return {"int": self.int_value, "hex": self.hex_value}

    def __str__(self) -> str:
        return self.render(colour=True)


@dataclass(frozen=True)
class Palette:
    """Seven named swatches in display order."""

    Vibrant: ColorInfo = ColorInfo()
    LightVibrant: ColorInfo = ColorInfo()
    DarkVibrant: ColorInfo = ColorInfo()
    Muted: ColorInfo = ColorInfo()
    LightMuted: ColorInfo = ColorInfo()
    DarkMuted: ColorInfo = ColorInfo()
    Dominant: ColorInfo = ColorInfo()

    @classmethod
    def from_assignments(cls, assignments: Mapping[str, Optional[int]]) -> "Palette":
        """Build from a swatch-name -> packed mapping; missing names are absent."""
        unknown = set(assignments) - set(SWATCH_NAMES)
        if unknown:
            raise ValueError(f"unknown swatch names: {sorted(unknown)}")
        return cls(**{name: ColorInfo(assignments.get(name)) for name in SWATCH_NAMES})

    def items(self) -> Iterator[Tuple[str, ColorInfo]]:
        for f in fields(self):
            yield f.name, getattr(self, f.name)

    def __getitem__(self, name: str) -> ColorInfo:
        if name not in SWATCH_NAMES:
            raise KeyError(name)
        return getattr(self, name)

    def to_text(self, colour: bool = True) -> str:
        return "\n".join(f"{name}: {info.render(colour)}" for name, info in self.items())

    def to_dict(self) -> Dict[str, Dict[str, object]]:
        return {name: info.to_dict() for name, info in self.items()}

    def __str__(self) -> str:
        return self.to_text(colour=True)


__all__ = ["ANSI_RESET", "ansi_foreground", "ColorInfo", "Palette"]
