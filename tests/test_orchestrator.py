from __future__ import annotations

import numpy as np
import pytest

from image_palette.core_types import SWATCH_NAMES
from image_palette.orchestrator import build_swatches


def test_missing_names_become_absent() -> None:
    out = build_swatches(np.zeros(4, dtype=np.int32), lambda px: {"Dominant": 5})
    assert list(out) == list(SWATCH_NAMES)
    assert out["Dominant"] == 5
    assert all(out[name] is None for name in SWATCH_NAMES[:6])


def test_generator_receives_pixels_untouched() -> None:
    seen = []
    pixels = np.arange(12, dtype=np.int32)

    def gen(px):
        seen.append(px)
        return {}

    build_swatches(pixels, gen)
    assert seen[0] is pixels


def test_values_normalised_to_signed_32_bit() -> None:
    out = build_swatches(np.zeros(1, dtype=np.int32), lambda px: {"Vibrant": 0xFFFF0000})
    assert out["Vibrant"] == -65536


def test_unknown_names_rejected() -> None:
    with pytest.raises(ValueError):
        build_swatches(np.zeros(1, dtype=np.int32), lambda px: {"Accent": 1})


def test_generator_errors_propagate() -> None:
    def gen(px):
        raise RuntimeError("degenerate image")

    with pytest.raises(RuntimeError, match="degenerate"):
        build_swatches(np.zeros(0, dtype=np.int32), gen)


def test_sink_reports_completion() -> None:
    messages = []
    build_swatches(np.zeros(1, dtype=np.int32), lambda px: {"Muted": 1}, sink=messages.append)
    assert messages == ["Generating palette from image", "Palette generated: 1 of 7 swatches found"]
