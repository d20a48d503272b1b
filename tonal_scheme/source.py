# tonal_scheme/source.py
from __future__ import annotations

"""
Source colour resolution.

A run is seeded from exactly one of:
  ImageSource(path) : sample -> Celebi quantize -> score -> best candidate
  ColorSource(hex)  : parsed literal colour

Quantization and scoring come from materialyoucolor.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Union

import numpy as np
from materialyoucolor.quantize import QuantizeCelebi
from materialyoucolor.score.score import Score

from .constants import MAX_QUANTIZE_COLORS, SAMPLE_WIDTH
from .core_types import SourceColor, U8Pixels, parse_hex_color
from .image_io import load_and_sample


@dataclass(frozen=True)
class ImageSource:
    path: Path


@dataclass(frozen=True)
class ColorSource:
    hex: str


Source = Union[ImageSource, ColorSource]


def _quantizer_input(pixels: U8Pixels) -> List[List[int]]:
    """ARGB rows -> the [r, g, b, a] lists materialyoucolor's quantizer reads."""
    return pixels[:, [1, 2, 3, 0]].tolist()


def quantize_pixels(
    pixels: U8Pixels, max_colors: int = MAX_QUANTIZE_COLORS
) -> Dict[int, int]:
    """Celebi quantization: {argb: population} with at most max_colors entries."""
    if pixels.ndim != 2 or pixels.shape[1] != 4 or pixels.shape[0] == 0:
        raise ValueError(f"expected non-empty (N,4) ARGB pixels, got {pixels.shape}")
    return QuantizeCelebi(_quantizer_input(pixels), max_colors)


def best_scored_color(colors_to_population: Dict[int, int]) -> SourceColor:
    """Highest ranked candidate according to the Material scoring heuristic."""
    ranked = Score.score(colors_to_population)
    return SourceColor.from_argb(int(ranked[0]))


def source_color_from_pixels(
    pixels: U8Pixels, max_colors: int = MAX_QUANTIZE_COLORS
) -> SourceColor:
    return best_scored_color(quantize_pixels(pixels, max_colors))


def source_color_from_image(
    path: Union[str, Path],
    target_width: int = SAMPLE_WIDTH,
    max_colors: int = MAX_QUANTIZE_COLORS,
) -> SourceColor:
    """Raises ImageDecodeError if the image cannot be read."""
    pixels = load_and_sample(path, target_width)
    return source_color_from_pixels(pixels, max_colors)


def source_color_from_hex(hex_str: str) -> SourceColor:
    """Raises HexColorError on malformed input."""
    return SourceColor.from_channels(parse_hex_color(hex_str))


def resolve_source_color(source: Source) -> SourceColor:
    if isinstance(source, ImageSource):
        return source_color_from_image(source.path)
    if isinstance(source, ColorSource):
        return source_color_from_hex(source.hex)
    raise TypeError(f"unsupported source: {source!r}")


def pixels_from_rgb_rows(rows: np.ndarray) -> U8Pixels:
    """Opaque ARGB pixels from (N,3) RGB rows; convenient for synthetic input."""
    rgb = np.asarray(rows, dtype=np.uint8).reshape(-1, 3)
    alpha = np.full((rgb.shape[0], 1), 255, dtype=np.uint8)
    return np.concatenate([alpha, rgb], axis=1)


__all__ = [
    "ImageSource",
    "ColorSource",
    "Source",
    "quantize_pixels",
    "best_scored_color",
    "source_color_from_pixels",
    "source_color_from_image",
    "source_color_from_hex",
    "resolve_source_color",
    "pixels_from_rgb_rows",
]
