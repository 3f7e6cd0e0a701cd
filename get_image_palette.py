#!/usr/bin/env python3
"""
get_image_palette.py
Extract seven representative swatches from image(s) for theming or terminal display.

Usage:
  python get_image_palette.py PATH [PATH ...] --max-width W --resample [nearest|bilinear|bicubic|lanczos] --colours K --json --colour [auto|always|never] --verbose

Swatches:
  Vibrant, LightVibrant, DarkVibrant, Muted, LightMuted, DarkMuted, Dominant.
  Each is printed as '#AARRGGBB' in its own colour, or "null" when the image
  has no qualifying colour.

Input:
  Any Pillow-readable image. Images wider than --max-width (50..2000, default 200)
  are downscaled before sampling; smaller images are used as-is.

Output:
  Text by default, one "Name: value" line per swatch. --json prints the int and
  hex form of every swatch instead.

Exit status:
  0 all paths succeeded, 2 some path was not found, 1 some palette failed.
"""

from __future__ import annotations

import argparse
import json
import sys
import time
from functools import partial
from pathlib import Path
from typing import Dict, List, Optional

from image_palette.constants import (
    DEFAULT_MAX_WIDTH,
    DEFAULT_RESAMPLE,
    MAX_MAX_WIDTH,
    MIN_MAX_WIDTH,
    QUANTIZE_COLOURS,
    RESAMPLE_NAMES,
)
from image_palette.errors import GenerationError, ImageNotFoundError
from image_palette.generator import generate_swatches
from image_palette.pipeline import get_image_palette
from image_palette.swatches import Palette
from image_palette.utils import (
    debug_log,
    enable_line_buffered_stdout,
    error,
    format_seconds_compact,
    log,
    print_banner,
    print_config_line,
    stdout_supports_colour,
)

EXIT_OK = 0
EXIT_GENERATION_ERROR = 1
EXIT_NOT_FOUND = 2

# CLI args & small helpers


def _max_width_arg(text: str) -> int:
    """argparse type: integer within [MIN_MAX_WIDTH, MAX_MAX_WIDTH]."""
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {text!r}") from None
    if not (MIN_MAX_WIDTH <= value <= MAX_MAX_WIDTH):
        raise argparse.ArgumentTypeError(
            f"must be within {MIN_MAX_WIDTH}..{MAX_MAX_WIDTH}, got {value}"
        )
    return value


def _colours_arg(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {text!r}") from None
    if not (1 <= value <= 256):
        raise argparse.ArgumentTypeError(f"must be within 1..256, got {value}")
    return value


def parse_cli_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse CLI arguments.

    Returns:
      argparse.Namespace with:
        paths: one or more image paths
        max_width: downscale cap in pixels
        resample: resize filter name
        colours: quantisation size for the default generator
        json: bool, machine-readable output
        colour: "auto" | "always" | "never"
        verbose: bool for step-by-step diagnostics
    """
    parser = argparse.ArgumentParser(
        prog="get-image-palette",
        description="Extract vibrant, muted and dominant swatches from image(s).",
    )
    parser.add_argument("paths", nargs="+", type=Path, help="Input image(s)")
    parser.add_argument(
        "--max-width",
        type=_max_width_arg,
        default=DEFAULT_MAX_WIDTH,
        help=f"Downscale so width<=W before sampling ({MIN_MAX_WIDTH}..{MAX_MAX_WIDTH}).",
    )
    parser.add_argument(
        "--resample",
        choices=list(RESAMPLE_NAMES),
        default=DEFAULT_RESAMPLE,
        help="Scaling filter.",
    )
    parser.add_argument(
        "--colours",
        type=_colours_arg,
        default=QUANTIZE_COLOURS,
        help="Colours kept by the quantiser before swatch scoring.",
    )
    parser.add_argument("--json", action="store_true", help="Print JSON instead of text")
    parser.add_argument(
        "--colour",
        choices=["auto", "always", "never"],
        default="auto",
        help='ANSI colour in text output. "auto" => only on a terminal.',
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Step-by-step diagnostics"
    )
    return parser.parse_args(argv)


def _use_colour(choice: str) -> bool:
    if choice == "always":
        return True
    if choice == "never":
        return False
    return stdout_supports_colour()


# Per-file processing


def _process_single_image(path: Path, args: argparse.Namespace) -> Palette:
    """Run the pipeline for one path. Errors propagate to main()."""
    sink = debug_log if args.verbose else None
    generator = partial(generate_swatches, colours=args.colours)
    t_start = time.perf_counter()
    palette = get_image_palette(
        path,
        args.max_width,
        generator=generator,
        resample=args.resample,
        sink=sink,
    )
    if args.verbose:
        debug_log(f"Total {format_seconds_compact(time.perf_counter() - t_start)}")
    return palette


# Entry point


def main(argv: Optional[List[str]] = None) -> int:
    """
    CLI entry point.

    Every path is processed even if an earlier one fails. Returns the exit status.
    """
    enable_line_buffered_stdout()
    args = parse_cli_args(argv)

    if args.verbose:
        print_config_line(
            "run",
            [
                ("Max width", args.max_width),
                ("Resample", args.resample),
                ("Colours", args.colours),
                ("Paths", len(args.paths)),
            ],
            debug=True,
        )

    colour = _use_colour(args.colour)
    status = EXIT_OK
    results: List[Dict[str, object]] = []

    for path in args.paths:
        try:
            palette = _process_single_image(path, args)
        except ImageNotFoundError as exc:
            error(str(exc))
            status = EXIT_NOT_FOUND
            continue
        except GenerationError as exc:
            error(str(exc))
            if status == EXIT_OK:
                status = EXIT_GENERATION_ERROR
            continue

        if args.json:
            results.append({"path": str(path), "palette": palette.to_dict()})
            continue
        if len(args.paths) > 1:
            print_banner(path.name)
        log(palette.to_text(colour=colour))

    if args.json:
        log(json.dumps(results, indent=2))
    return status


if __name__ == "__main__":
    sys.exit(main())
