# image_palette/orchestrator.py
from __future__ import annotations

"""
PaletteOrchestrator: run a palette generator over packed pixels and repackage
its answer into the fixed seven-entry swatch mapping.
"""

from typing import Dict, Optional

from .core_types import (
    SWATCH_NAMES,
    DiagnosticSink,
    PackedPixels,
    PaletteGenerator,
    emit,
    to_int32,
)
from .generator import generate_swatches


def build_swatches(
    pixels: PackedPixels,
    generator: PaletteGenerator = generate_swatches,
    *,
    sink: DiagnosticSink = None,
) -> Dict[str, Optional[int]]:
    """
    Returns {swatch name: packed ARGB or None} over SWATCH_NAMES, in order.

    Names the generator leaves out are absent (None). Names outside the
    closed set raise ValueError. Generator errors propagate unchanged.
    """
    emit(sink, "Generating palette from image")
    raw = generator(pixels)

    unknown = [name for name in raw if name not in SWATCH_NAMES]
    if unknown:
        raise ValueError(f"generator returned unknown swatch names: {unknown}")

    out: Dict[str, Optional[int]] = {}
    for name in SWATCH_NAMES:
        value = raw.get(name)
        out[name] = None if value is None else to_int32(value)
    found = sum(v is not None for v in out.values())
    emit(sink, f"Palette generated: {found} of {len(SWATCH_NAMES)} swatches found")
    return out


__all__ = ["build_swatches"]
