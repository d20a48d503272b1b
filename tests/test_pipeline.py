"""End-to-end runs: source -> scheme -> correction -> output mapping."""

import re

import numpy as np
import pytest

from tonal_scheme.colour_convert import rgb_to_hsl, shift_channels
from tonal_scheme.correct import apply_baseline
from tonal_scheme.errors import HexColorError
from tonal_scheme.mode import PaletteVariant, SchemeMode
from tonal_scheme.output import format_scheme, render_json
from tonal_scheme.pipeline import run
from tonal_scheme.roles import ALL_ROLES, CORRECTION_ROLES, Role
from tonal_scheme.source import ColorSource

HEX6 = re.compile(r"^[0-9a-f]{6}$")


def test_light_red_scenario():
    result = run(ColorSource("ff0000"), SchemeMode.LIGHT)
    r, g, b = result.corrected[Role.PRIMARY]
    assert r > g and r > b
    assert result.output["primary"] == f"{r:02x}{g:02x}{b:02x}"

    before = result.generated[Role.SURFACE_BRIGHT]
    after = result.corrected[Role.SURFACE_BRIGHT]
    assert all(a >= c for a, c in zip(after, before))
    baseline_only = apply_baseline(result.generated)[Role.SURFACE_BRIGHT]
    assert after == shift_channels(baseline_only, 1.0)


def test_dark_black_scenario():
    result = run(ColorSource("000000"), SchemeMode.DARK)
    gen, out = result.generated, result.corrected

    assert out[Role.SURFACE] == shift_channels(gen[Role.SURFACE], -1.0)
    assert out[Role.SURFACE_DIM] == shift_channels(
        shift_channels(gen[Role.SURFACE_DIM], -1.0), -1.0
    )
    assert all(d < s for d, s in zip(out[Role.SURFACE_DIM], out[Role.SURFACE]))

    surface_l = rgb_to_hsl(np.array(out[Role.SURFACE]))[2]
    bright_l = rgb_to_hsl(np.array(out[Role.SURFACE_BRIGHT]))[2]
    assert bright_l > surface_l


def test_malformed_hex_produces_no_result():
    with pytest.raises(HexColorError):
        run(ColorSource("zzzzzz"), SchemeMode.DARK)


@pytest.mark.parametrize("variant", list(PaletteVariant))
@pytest.mark.parametrize("mode", list(SchemeMode))
def test_output_keys_match_scheme_keys(mode, variant):
    result = run(ColorSource("#6750a4"), mode, variant)
    assert set(result.output) == {role.value for role in result.generated}
    assert list(result.output) == [role.value for role in ALL_ROLES]
    assert all(HEX6.match(v) for v in result.output.values())


def test_correction_roles_never_brighter_in_amoled():
    result = run(ColorSource("#3a7bd5"), SchemeMode.AMOLED)
    for role in CORRECTION_ROLES:
        assert all(
            a <= b for a, b in zip(result.corrected[role], result.generated[role])
        )


def test_result_records_inputs():
    result = run(ColorSource("#a1b2c3"), SchemeMode.LIGHT, PaletteVariant.RAINBOW)
    assert result.source_color.rgb == (0xA1, 0xB2, 0xC3)
    assert result.mode is SchemeMode.LIGHT
    assert result.variant is PaletteVariant.RAINBOW


def test_format_and_render():
    scheme = {Role.PRIMARY: (255, 0, 171), Role.SURFACE: (1, 2, 3)}
    mapping = format_scheme(scheme)
    # Role order, not insertion order
    assert list(mapping) == ["surface", "primary"]
    assert mapping == {"surface": "010203", "primary": "ff00ab"}
    assert render_json(mapping) == '{"surface": "010203", "primary": "ff00ab"}'
