# tonal_scheme/mode.py
from __future__ import annotations

from enum import Enum
from typing import Type, TypeVar

from .errors import InputError

"""
Scheme mode and palette variant selectors.

Exports:
- SchemeMode      : amoled | dark | light (default dark)
- PaletteVariant  : tonal-algebra flavour, passed through to the generator
- parse_mode(text), parse_variant(text)

Notes:
- Names are case-insensitive and '-' / '_' are interchangeable, so
  "fruit-salad" and "FRUIT_SALAD" both resolve.
"""


class SchemeMode(str, Enum):
    AMOLED = "amoled"
    DARK = "dark"
    LIGHT = "light"

    @property
    def is_dark(self) -> bool:
        return self is not SchemeMode.LIGHT

    def __str__(self) -> str:
        return self.value


class PaletteVariant(str, Enum):
    DEFAULT = "default"  # tonal spot
    CONTENT = "content"
    EXPRESSIVE = "expressive"
    FIDELITY = "fidelity"
    FRUIT_SALAD = "fruit_salad"
    MONOCHROME = "monochrome"
    NEUTRAL = "neutral"
    RAINBOW = "rainbow"
    VIBRANT = "vibrant"

    def __str__(self) -> str:
        return self.value


E = TypeVar("E", SchemeMode, PaletteVariant)


def _parse(enum_cls: Type[E], text: str, what: str) -> E:
    key = text.strip().lower().replace("-", "_")
    try:
        return enum_cls(key)
    except ValueError:
        choices = ", ".join(m.value for m in enum_cls)
        raise InputError(f"unknown {what} {text!r} (choose from: {choices})") from None


def parse_mode(text: str) -> SchemeMode:
    return _parse(SchemeMode, text, "mode")


def parse_variant(text: str) -> PaletteVariant:
    return _parse(PaletteVariant, text, "palette")


__all__ = ["SchemeMode", "PaletteVariant", "parse_mode", "parse_variant"]
