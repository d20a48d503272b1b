# tonal_scheme/core_types.py
from __future__ import annotations

"""
Core type aliases, small value objects, and hex/ARGB helpers.
"""

from dataclasses import dataclass
from typing import Sequence, Tuple, Union

import numpy as np
from numpy.typing import NDArray

from .errors import HexColorError

# Basic aliases

RGBTuple = Tuple[int, int, int]
ARGBTuple = Tuple[int, int, int, int]

U8Pixels = NDArray[np.uint8]  # (N, 4) ARGB rows
Hsl = NDArray[np.float64]  # (..., 3) hue deg, saturation 0..1, lightness 0..1

_HEX_DIGITS = frozenset("0123456789abcdef")


# Value objects


@dataclass(frozen=True)
class SourceColor:
    """Seed colour for scheme generation, four 8-bit channels."""

    alpha: int
    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        for name in ("alpha", "red", "green", "blue"):
            value = getattr(self, name)
            if not 0 <= int(value) <= 255:
                raise ValueError(f"{name} channel out of range: {value}")

    @classmethod
    def from_argb(cls, argb: int) -> "SourceColor":
        return cls(
            (argb >> 24) & 0xFF,
            (argb >> 16) & 0xFF,
            (argb >> 8) & 0xFF,
            argb & 0xFF,
        )

    @classmethod
    def from_channels(cls, channels: Sequence[int]) -> "SourceColor":
        a, r, g, b = (int(c) for c in channels)
        return cls(a, r, g, b)

    @property
    def argb(self) -> int:
        """Packed 0xAARRGGBB integer, as expected by the tonal algebra."""
        return (self.alpha << 24) | (self.red << 16) | (self.green << 8) | self.blue

    @property
    def rgb(self) -> RGBTuple:
        return (self.red, self.green, self.blue)

    def to_hex(self) -> str:
        return rgb_to_hex(self.rgb)


# Small helpers


def clamp_channel(value: float) -> int:
    """Round to the nearest integer and clamp to [0, 255]."""
    v = int(round(float(value)))
    return 0 if v < 0 else 255 if v > 255 else v


def coerce_to_rgb_tuple(value: Union[Sequence[int], NDArray[np.generic]]) -> RGBTuple:
    """
    Coerce a 3-length sequence or array to a clamped (int, int, int) tuple.
    Helpful when extracting values from NumPy rows.
    """
    if len(value) < 3:  # type: ignore[arg-type]
        raise ValueError("sequence too small for RGB")
    return (clamp_channel(value[0]), clamp_channel(value[1]), clamp_channel(value[2]))


def rgb_to_hex(rgb: RGBTuple, prefix: str = "#") -> str:
    """RGB tuple to lowercase hex string '#rrggbb' (prefix configurable)."""
    return f"{prefix}{rgb[0]:02x}{rgb[1]:02x}{rgb[2]:02x}"


def parse_hex_color(hex_str: str) -> ARGBTuple:
    """
    Parse 'rgb', 'rgba', 'rrggbb' or 'rrggbbaa' into (a, r, g, b).

    The leading '#' is optional, case is ignored and alpha defaults to 255.
    """
    s = hex_str.strip().lower()
    if s.startswith("#"):
        s = s[1:]
    if not s or any(ch not in _HEX_DIGITS for ch in s):
        raise HexColorError(f"malformed hex colour: {hex_str!r}")
    if len(s) in (3, 4):
        s = "".join(ch * 2 for ch in s)
    if len(s) == 6:
        s += "ff"
    if len(s) != 8:
        raise HexColorError(
            f"malformed hex colour: {hex_str!r} (expected 3, 4, 6 or 8 digits)"
        )
    r, g, b, a = (int(s[i : i + 2], 16) for i in range(0, 8, 2))
    return (a, r, g, b)


def argb_to_rgb(argb: int) -> RGBTuple:
    """Unpack the colour channels of a 0xAARRGGBB integer."""
    return ((argb >> 16) & 0xFF, (argb >> 8) & 0xFF, argb & 0xFF)


def rgb_to_argb(rgb: RGBTuple, alpha: int = 255) -> int:
    return (alpha << 24) | (rgb[0] << 16) | (rgb[1] << 8) | rgb[2]


def assert_u8_image_rgba(image: np.ndarray) -> np.ndarray:
    """Validate a uint8 (H,W,4) image array."""
    if image.dtype != np.uint8 or image.ndim != 3 or image.shape[-1] != 4:
        raise TypeError("expected uint8 (H,W,4) image")
    return image


__all__ = [
    # aliases / types
    "RGBTuple",
    "ARGBTuple",
    "U8Pixels",
    "Hsl",
    # value objects
    "SourceColor",
    # helpers
    "clamp_channel",
    "coerce_to_rgb_tuple",
    "rgb_to_hex",
    "parse_hex_color",
    "argb_to_rgb",
    "rgb_to_argb",
    "assert_u8_image_rgba",
]
