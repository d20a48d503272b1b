#!/usr/bin/env python3
"""
make_scheme.py
Generate a Material colour scheme from an image or a hex colour.

Usage:
  python make_scheme.py [--mode amoled|dark|light] [--palette VARIANT] image PATH
  python make_scheme.py [--mode amoled|dark|light] [--palette VARIANT] color HEX

Sources:
  image : source colour picked from the image (sampled to 64px wide, Celebi
          quantized to 128 colours, best scored candidate).
  color : source colour given directly, e.g. "#a1b2c3", "a1b2c3" or "a1b2c3ff".

Output:
  One JSON object on stdout, role name -> "rrggbb". Diagnostics and errors go
  to stderr. Exit status 2 on bad input, with nothing on stdout.
"""

from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path
from typing import List, Optional, Sequence

from tonal_scheme import __version__
from tonal_scheme.errors import InputError
from tonal_scheme.mode import PaletteVariant, SchemeMode, parse_mode, parse_variant
from tonal_scheme.output import render_json
from tonal_scheme.pipeline import build_from_color
from tonal_scheme.source import ColorSource, ImageSource, Source, resolve_source_color
from tonal_scheme.utils import (
    debug_log,
    error,
    format_seconds_compact,
    key_value_pairs_to_string,
    print_config_line,
)

# CLI args


def _normalise_choice(text: str) -> str:
    return text.strip().lower().replace("-", "_")


def _add_common_options(parser: argparse.ArgumentParser, suppress: bool) -> None:
    """
    Options accepted both before and after the subcommand.

    Subparser copies use SUPPRESS defaults so they never overwrite a value
    given before the subcommand.
    """

    def default(value: object) -> object:
        return argparse.SUPPRESS if suppress else value

    parser.add_argument(
        "-m",
        "--mode",
        type=_normalise_choice,
        choices=[m.value for m in SchemeMode],
        default=default(SchemeMode.DARK.value),
        metavar="TYPE",
        help="Scheme type: amoled, dark or light (default: dark).",
    )
    parser.add_argument(
        "-p",
        "--palette",
        type=_normalise_choice,
        choices=[v.value for v in PaletteVariant],
        default=default(PaletteVariant.DEFAULT.value),
        metavar="PALETTE",
        help="Palette variant used to generate colours (default: default).",
    )
    parser.add_argument(
        "--indent",
        type=int,
        default=default(None),
        help="Pretty-print the JSON with this indent.",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        default=default(False),
        help="Timing and source colour details on stderr.",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="make-scheme",
        description="Generate a Material colour scheme from an image or a colour.",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    _add_common_options(parser, suppress=False)

    sub = parser.add_subparsers(dest="source", metavar="SOURCE", required=True)
    image = sub.add_parser("image", help="Extract the source colour from an image.")
    image.add_argument("path", type=Path, help="Image file")
    _add_common_options(image, suppress=True)

    color = sub.add_parser("color", help="Use this colour as the source.")
    color.add_argument("hex", help="Hex colour, with or without '#' and alpha")
    _add_common_options(color, suppress=True)
    return parser


def parse_cli_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """
    Parse CLI arguments.

    Returns:
      argparse.Namespace with:
        source: "image" | "color"
        path / hex: the input for that source
        mode: "amoled" | "dark" | "light"
        palette: palette variant name
        indent: optional JSON indent
        debug: bool
    """
    return build_parser().parse_args(argv)


def _source_from_args(args: argparse.Namespace) -> Source:
    if args.source == "image":
        return ImageSource(args.path)
    return ColorSource(args.hex)


# Entry point


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    CLI entry point. Returns the process exit status.

    Input errors are reported on stderr with status 2 and nothing on stdout.
    """
    args = parse_cli_args(argv)
    mode = parse_mode(args.mode)
    variant = parse_variant(args.palette)
    source = _source_from_args(args)

    if args.debug:
        print_config_line(
            "run",
            [("Source", args.source), ("Mode", mode.value), ("Palette", variant.value)],
        )

    t_start = time.perf_counter()
    try:
        source_color = resolve_source_color(source)
    except InputError as e:
        error(str(e))
        return 2
    t_resolved = time.perf_counter()

    result = build_from_color(source_color, mode, variant)
    t_done = time.perf_counter()

    if args.debug:
        changed: List[str] = [
            role.value
            for role, rgb in result.corrected.items()
            if result.generated[role] != rgb
        ]
        debug_log(
            key_value_pairs_to_string(
                [
                    ("Source colour", source_color.to_hex()),
                    ("Alpha", source_color.alpha),
                    ("Roles", len(result.output)),
                    ("Corrected", len(changed)),
                ]
            )
        )
        debug_log(
            f"Total {format_seconds_compact(t_done - t_start)}  "
            f"(source={format_seconds_compact(t_resolved - t_start)}, "
            f"scheme={format_seconds_compact(t_done - t_resolved)})"
        )

    print(render_json(result.output, indent=args.indent), flush=True)
    return 0


if __name__ == "__main__":
    sys.exit(main())
