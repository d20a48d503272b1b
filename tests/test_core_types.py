"""Tests for hex parsing, formatting and the SourceColor value object."""

import pytest

from tonal_scheme.core_types import (
    SourceColor,
    argb_to_rgb,
    clamp_channel,
    parse_hex_color,
    rgb_to_argb,
    rgb_to_hex,
)
from tonal_scheme.errors import HexColorError, InputError


@pytest.mark.parametrize(
    "text, expected",
    [
        ("#a1b2c3", (255, 0xA1, 0xB2, 0xC3)),
        ("a1b2c3", (255, 0xA1, 0xB2, 0xC3)),
        ("A1B2C3", (255, 0xA1, 0xB2, 0xC3)),
        ("  #a1b2c3 ", (255, 0xA1, 0xB2, 0xC3)),
        ("#a1b2c380", (0x80, 0xA1, 0xB2, 0xC3)),
        ("#f00", (255, 255, 0, 0)),
        ("0f08", (0x88, 0, 0xFF, 0)),
    ],
)
def test_parse_hex_color_accepted_forms(text, expected):
    assert parse_hex_color(text) == expected


@pytest.mark.parametrize("text", ["zzzzzz", "", "#", "#12345", "1234567", "#ff00zz", "ff 00 00"])
def test_parse_hex_color_rejects_malformed(text):
    with pytest.raises(HexColorError):
        parse_hex_color(text)


def test_hex_color_error_is_input_and_value_error():
    with pytest.raises(InputError):
        parse_hex_color("nope")
    with pytest.raises(ValueError):
        parse_hex_color("nope")


def test_parse_and_format_are_inverse():
    for rgb in [(0, 0, 0), (255, 255, 255), (0xA1, 0xB2, 0xC3), (1, 128, 254)]:
        a, r, g, b = parse_hex_color(rgb_to_hex(rgb))
        assert (r, g, b) == rgb
        assert a == 255
        assert parse_hex_color(rgb_to_hex(rgb, prefix="")) == (255, *rgb)


def test_rgb_to_hex_lowercase_and_prefix():
    assert rgb_to_hex((255, 10, 171)) == "#ff0aab"
    assert rgb_to_hex((255, 10, 171), prefix="") == "ff0aab"


def test_source_color_argb_packing():
    c = SourceColor(255, 0x12, 0x34, 0x56)
    assert c.argb == 0xFF123456
    assert SourceColor.from_argb(0xFF123456) == c
    assert c.rgb == (0x12, 0x34, 0x56)
    assert c.to_hex() == "#123456"


def test_source_color_rejects_out_of_range_channel():
    with pytest.raises(ValueError):
        SourceColor(255, 256, 0, 0)


def test_argb_helpers():
    assert argb_to_rgb(0x80FF7F00) == (255, 127, 0)
    assert rgb_to_argb((255, 127, 0)) == 0xFFFF7F00
    assert rgb_to_argb((1, 2, 3), alpha=0) == 0x00010203


def test_clamp_channel_saturates():
    assert clamp_channel(-3) == 0
    assert clamp_channel(258) == 255
    assert clamp_channel(22.95) == 23
