# tonal_scheme/colour_convert.py
from __future__ import annotations

"""
Colour conversions and brightness adjustments.

Exports:
  rgb_to_hsl(rgb)
  hsl_to_rgb(hsl)
  channel_shift_delta(amount)
  shift_channels(rgb, amount)
  scale_lightness(rgb, factor)
"""

import math

import numpy as np

from .core_types import Hsl, RGBTuple, coerce_to_rgb_tuple


# sRGB to HSL


def rgb_to_hsl(rgb: np.ndarray) -> Hsl:
    """
    RGB [0..255] to HSL. Vectorised, shape (...,3) preserved.
    Hue in degrees [0,360), saturation and lightness in [0,1]. Returns float64.
    """
    arr = np.asarray(rgb, dtype=np.float64) / 255.0
    r, g, b = arr[..., 0], arr[..., 1], arr[..., 2]
    c_max = np.max(arr, axis=-1)
    c_min = np.min(arr, axis=-1)
    delta = c_max - c_min
    lightness = (c_max + c_min) / 2.0

    with np.errstate(invalid="ignore", divide="ignore"):
        saturation = np.where(
            delta == 0.0, 0.0, delta / (1.0 - np.abs(2.0 * lightness - 1.0))
        )
        safe = np.where(delta == 0.0, 1.0, delta)
        hue = np.where(
            c_max == r,
            ((g - b) / safe) % 6.0,
            np.where(c_max == g, (b - r) / safe + 2.0, (r - g) / safe + 4.0),
        )
    hue = np.where(delta == 0.0, 0.0, hue * 60.0) % 360.0

    out = np.empty(arr.shape, dtype=np.float64)
    out[..., 0] = hue
    out[..., 1] = np.clip(saturation, 0.0, 1.0)
    out[..., 2] = lightness
    return out


# HSL to sRGB


def hsl_to_rgb(hsl: Hsl) -> np.ndarray:
    """
    HSL to RGB [0..255] float64. Inverse of rgb_to_hsl, shape preserved.
    Callers round and clamp when they need 8-bit channels.
    """
    arr = np.asarray(hsl, dtype=np.float64)
    h = arr[..., 0] % 360.0
    s = np.clip(arr[..., 1], 0.0, 1.0)
    l = np.clip(arr[..., 2], 0.0, 1.0)

    chroma = (1.0 - np.abs(2.0 * l - 1.0)) * s
    h_prime = h / 60.0
    x = chroma * (1.0 - np.abs(h_prime % 2.0 - 1.0))
    m = l - chroma / 2.0
    zero = np.zeros_like(chroma)

    sector = np.floor(h_prime).astype(np.int64) % 6
    r1 = np.choose(sector, [chroma, x, zero, zero, x, chroma])
    g1 = np.choose(sector, [x, chroma, chroma, x, zero, zero])
    b1 = np.choose(sector, [zero, zero, x, chroma, chroma, x])

    out = np.empty(arr.shape, dtype=np.float64)
    out[..., 0] = (r1 + m) * 255.0
    out[..., 1] = (g1 + m) * 255.0
    out[..., 2] = (b1 + m) * 255.0
    return out


# Brightness adjustments


def channel_shift_delta(amount: float) -> int:
    """
    Per-channel delta subtracted by shift_channels.

    amount=-1.0 gives 2 (darken), amount=+1.0 gives -3 (brighten).
    """
    return math.floor(255.0 * -(amount / 100.0))


def shift_channels(rgb: RGBTuple, amount: float) -> RGBTuple:
    """
    Shift R, G and B by the same signed step, clamped to [0, 255].

    Unlike a HSL lighten this does not drift the colour towards its hue.
    Negative amounts darken, positive amounts brighten.
    """
    delta = channel_shift_delta(amount)
    return coerce_to_rgb_tuple([channel - delta for channel in rgb])


def scale_lightness(rgb: RGBTuple, factor: float) -> RGBTuple:
    """Multiply HSL lightness by factor (clamped to [0, 1]); hue and saturation kept."""
    hsl = rgb_to_hsl(np.array(rgb, dtype=np.float64))
    hsl[2] = min(1.0, max(0.0, hsl[2] * factor))
    return coerce_to_rgb_tuple(hsl_to_rgb(hsl))


__all__ = [
    "rgb_to_hsl",
    "hsl_to_rgb",
    "channel_shift_delta",
    "shift_channels",
    "scale_lightness",
]
