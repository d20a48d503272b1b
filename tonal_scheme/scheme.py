# tonal_scheme/scheme.py
from __future__ import annotations

"""
Tonal scheme generation via materialyoucolor's dynamic colour schemes.

Exports:
  Scheme                                  : Dict[Role, RGBTuple]
  SCHEME_CLASSES                          : PaletteVariant -> scheme class
  generate_scheme(source, variant, mode)  -> Scheme
"""

from typing import Dict, Mapping, Type

from materialyoucolor.dynamiccolor.material_dynamic_colors import MaterialDynamicColors
from materialyoucolor.hct import Hct
from materialyoucolor.scheme.dynamic_scheme import DynamicScheme
from materialyoucolor.scheme.scheme_content import SchemeContent
from materialyoucolor.scheme.scheme_expressive import SchemeExpressive
from materialyoucolor.scheme.scheme_fidelity import SchemeFidelity
from materialyoucolor.scheme.scheme_fruit_salad import SchemeFruitSalad
from materialyoucolor.scheme.scheme_monochrome import SchemeMonochrome
from materialyoucolor.scheme.scheme_neutral import SchemeNeutral
from materialyoucolor.scheme.scheme_rainbow import SchemeRainbow
from materialyoucolor.scheme.scheme_tonal_spot import SchemeTonalSpot
from materialyoucolor.scheme.scheme_vibrant import SchemeVibrant
from materialyoucolor.temperature.temperature_cache import TemperatureCache

from .constants import AMOLED_BLACK, AMOLED_BLACK_ROLES, CONTRAST_LEVEL
from .core_types import RGBTuple, SourceColor, argb_to_rgb
from .errors import MissingRoleError
from .mode import PaletteVariant, SchemeMode
from .roles import ALL_ROLES, Role

Scheme = Dict[Role, RGBTuple]

SCHEME_CLASSES: Mapping[PaletteVariant, Type[DynamicScheme]] = {
    PaletteVariant.DEFAULT: SchemeTonalSpot,
    PaletteVariant.CONTENT: SchemeContent,
    PaletteVariant.EXPRESSIVE: SchemeExpressive,
    PaletteVariant.FIDELITY: SchemeFidelity,
    PaletteVariant.FRUIT_SALAD: SchemeFruitSalad,
    PaletteVariant.MONOCHROME: SchemeMonochrome,
    PaletteVariant.NEUTRAL: SchemeNeutral,
    PaletteVariant.RAINBOW: SchemeRainbow,
    PaletteVariant.VIBRANT: SchemeVibrant,
}


def has_temperature_range(hct: Hct) -> bool:
    """
    True when rotating the hue of hct changes its colour temperature.

    Colourless seeds (black, white, greys) stay the same colour at every
    hue, so there is no complement to pick.
    """
    cache = TemperatureCache(hct)
    return cache.temps_by_hct[cache.warmest] != cache.temps_by_hct[cache.coldest]


def scheme_class_for(variant: PaletteVariant, hct: Hct) -> Type[DynamicScheme]:
    """
    Scheme class for variant. Fidelity derives its tertiary palette from the
    temperature complement of the seed; without a temperature range it falls
    back to the default class.
    """
    if variant is PaletteVariant.FIDELITY and not has_temperature_range(hct):
        return SCHEME_CLASSES[PaletteVariant.DEFAULT]
    return SCHEME_CLASSES[variant]


def build_dynamic_scheme(
    source: SourceColor,
    variant: PaletteVariant,
    is_dark: bool,
    contrast_level: float = CONTRAST_LEVEL,
) -> DynamicScheme:
    hct = Hct.from_int(source.argb)
    return scheme_class_for(variant, hct)(hct, is_dark, contrast_level)


def read_roles(dynamic_scheme: DynamicScheme) -> Scheme:
    """Read every Role from a dynamic scheme, in Role order."""
    colors = MaterialDynamicColors()
    scheme: Scheme = {}
    for role in ALL_ROLES:
        dynamic_color = getattr(colors, role.dynamic_color_name, None)
        if dynamic_color is None:
            raise MissingRoleError(
                f"tonal algebra does not provide role {role.value!r}"
            )
        scheme[role] = argb_to_rgb(dynamic_color.get_argb(dynamic_scheme))
    return scheme


def apply_amoled(scheme: Scheme) -> Scheme:
    """Pure-dark variant: background and lowest surfaces forced to black."""
    out = dict(scheme)
    for name in AMOLED_BLACK_ROLES:
        out[Role(name)] = AMOLED_BLACK
    return out


def generate_scheme(
    source: SourceColor,
    variant: PaletteVariant = PaletteVariant.DEFAULT,
    mode: SchemeMode = SchemeMode.DARK,
) -> Scheme:
    """
    Expand a source colour into a complete role -> colour mapping.

    Deterministic: the same (source, variant, mode) always yields the same scheme.
    """
    dynamic_scheme = build_dynamic_scheme(source, variant, mode.is_dark)
    scheme = read_roles(dynamic_scheme)
    if mode is SchemeMode.AMOLED:
        scheme = apply_amoled(scheme)
    return scheme


__all__ = [
    "Scheme",
    "SCHEME_CLASSES",
    "has_temperature_range",
    "scheme_class_for",
    "build_dynamic_scheme",
    "read_roles",
    "apply_amoled",
    "generate_scheme",
]
