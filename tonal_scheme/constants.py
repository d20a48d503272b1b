"""
Tunables used across the project.

- Sampling (SAMPLE_*)
- Quantization (MAX_QUANTIZE_COLORS)
- Correction amounts and factors
- Amoled overrides
"""
from __future__ import annotations

from typing import Tuple

# =========================
# Image sampling
# =========================
# Width cap for the sampled image; height follows the aspect ratio.
SAMPLE_WIDTH: int = 64

# =========================
# Source colour
# =========================
MAX_QUANTIZE_COLORS: int = 128

# =========================
# Scheme generation
# =========================
CONTRAST_LEVEL: float = 0.0

# Roles forced to pure black in amoled mode (names, see roles.Role).
AMOLED_BLACK_ROLES: Tuple[str, ...] = (
    "background",
    "surface",
    "surface_dim",
    "surface_container_lowest",
)
AMOLED_BLACK: Tuple[int, int, int] = (0, 0, 0)

# =========================
# Role correction
# =========================
# Applied to every baseline role. Negative darkens, positive brightens.
BASELINE_SHIFT_AMOUNT: float = -1.0
DARK_SURFACE_DIM_AMOUNT: float = -1.0
LIGHT_SURFACE_BRIGHT_AMOUNT: float = 1.0
# surface_bright = surface with lightness multiplied by this (dark mode)
DARK_SURFACE_BRIGHT_LIGHTNESS: float = 1.35

