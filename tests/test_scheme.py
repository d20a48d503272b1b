"""Tests for scheme generation through materialyoucolor."""

import pytest

from tonal_scheme.core_types import SourceColor
from tonal_scheme.errors import InputError
from tonal_scheme.mode import PaletteVariant, SchemeMode, parse_mode, parse_variant
from tonal_scheme.roles import ALL_ROLES, Role, role_from_name
from materialyoucolor.hct import Hct
from materialyoucolor.scheme.scheme_fidelity import SchemeFidelity
from materialyoucolor.scheme.scheme_tonal_spot import SchemeTonalSpot

from tonal_scheme.scheme import (
    SCHEME_CLASSES,
    generate_scheme,
    has_temperature_range,
    scheme_class_for,
)

SOURCE = SourceColor(255, 0x41, 0x69, 0xE1)


def test_every_variant_has_a_scheme_class():
    assert set(SCHEME_CLASSES) == set(PaletteVariant)


@pytest.mark.parametrize("variant", list(PaletteVariant))
@pytest.mark.parametrize("mode", list(SchemeMode))
def test_scheme_has_every_role(variant, mode):
    scheme = generate_scheme(SOURCE, variant, mode)
    assert list(scheme) == list(ALL_ROLES)
    for rgb in scheme.values():
        assert len(rgb) == 3
        assert all(0 <= c <= 255 for c in rgb)


COLOURLESS = [SourceColor(255, 0, 0, 0), SourceColor(255, 255, 255, 255)]


@pytest.mark.parametrize("source", COLOURLESS, ids=lambda c: c.to_hex())
@pytest.mark.parametrize("variant", list(PaletteVariant))
@pytest.mark.parametrize("mode", list(SchemeMode))
def test_colourless_seed_has_every_role(source, variant, mode):
    scheme = generate_scheme(source, variant, mode)
    assert list(scheme) == list(ALL_ROLES)


@pytest.mark.parametrize("source", COLOURLESS, ids=lambda c: c.to_hex())
def test_fidelity_falls_back_to_default_without_temperature_range(source):
    hct = Hct.from_int(source.argb)
    assert not has_temperature_range(hct)
    assert scheme_class_for(PaletteVariant.FIDELITY, hct) is SchemeTonalSpot
    for mode in SchemeMode:
        assert generate_scheme(source, PaletteVariant.FIDELITY, mode) == generate_scheme(
            source, PaletteVariant.DEFAULT, mode
        )


def test_fidelity_kept_for_coloured_seed():
    hct = Hct.from_int(SOURCE.argb)
    assert has_temperature_range(hct)
    assert scheme_class_for(PaletteVariant.FIDELITY, hct) is SchemeFidelity


def test_generation_is_deterministic():
    a = generate_scheme(SOURCE, PaletteVariant.VIBRANT, SchemeMode.LIGHT)
    b = generate_scheme(SOURCE, PaletteVariant.VIBRANT, SchemeMode.LIGHT)
    assert a == b


def test_dark_and_light_surfaces_differ():
    dark = generate_scheme(SOURCE, PaletteVariant.DEFAULT, SchemeMode.DARK)
    light = generate_scheme(SOURCE, PaletteVariant.DEFAULT, SchemeMode.LIGHT)
    assert sum(dark[Role.SURFACE]) < sum(light[Role.SURFACE])


def test_amoled_is_dark_with_black_backgrounds():
    dark = generate_scheme(SOURCE, PaletteVariant.DEFAULT, SchemeMode.DARK)
    amoled = generate_scheme(SOURCE, PaletteVariant.DEFAULT, SchemeMode.AMOLED)
    black = {
        Role.BACKGROUND,
        Role.SURFACE,
        Role.SURFACE_DIM,
        Role.SURFACE_CONTAINER_LOWEST,
    }
    for role in ALL_ROLES:
        if role in black:
            assert amoled[role] == (0, 0, 0)
        else:
            assert amoled[role] == dark[role]


def test_role_names_map_to_dynamic_colors():
    assert Role.SURFACE_CONTAINER_HIGHEST.dynamic_color_name == "surfaceContainerHighest"
    assert Role.ON_PRIMARY_FIXED_VARIANT.dynamic_color_name == "onPrimaryFixedVariant"
    assert role_from_name("inverseOnSurface") is Role.INVERSE_ON_SURFACE
    assert role_from_name("surface_dim") is Role.SURFACE_DIM
    with pytest.raises(ValueError):
        role_from_name("surfce")


def test_mode_and_variant_parsing():
    assert parse_mode(" Light ") is SchemeMode.LIGHT
    assert parse_variant("Fruit-Salad") is PaletteVariant.FRUIT_SALAD
    assert SchemeMode.AMOLED.is_dark and not SchemeMode.LIGHT.is_dark
    with pytest.raises(InputError, match="choose from"):
        parse_mode("sepia")
