from __future__ import annotations

import pytest

from shapekit.colors import DEFAULT_PALETTE, PaletteResolver, format_color, parse_color, to_rgba
from shapekit.validation import ColorLookupError, ColorParseError


def test_parse_six_digit_hex_is_opaque():
    assert parse_color("#336699") == 0xFF336699


def test_parse_eight_digit_hex_keeps_alpha():
    assert parse_color("#00336699") == 0x00336699
    assert parse_color("#80abcdef") == 0x80ABCDEF


@pytest.mark.parametrize("name, expected", [("red", 0xFFFF0000), ("Teal", 0xFF008080), ("GREY", 0xFF888888)])
def test_parse_named_colors(name, expected):
    assert parse_color(name) == expected


@pytest.mark.parametrize("text", ["", "#", "#12345", "#1234567", "#GGGGGG", "#+12345", "#12_345", "not-a-color", "336699"])
def test_parse_rejects_malformed_text(text):
    with pytest.raises(ColorParseError):
        parse_color(text)


def test_parse_rejects_non_string():
    with pytest.raises(ColorParseError):
        parse_color(0xFF000000)


def test_format_color_round_trips_hex():
    assert format_color(0xFF336699) == "#FF336699"
    assert format_color(0) == "#00000000"


def test_to_rgba_components():
    r, g, b, a = to_rgba(0x80FF0000)
    assert (r, g, b) == (1.0, 0.0, 0.0)
    assert a == pytest.approx(128 / 255)


def test_palette_resolver_accepts_ints_and_strings():
    resolver = PaletteResolver({"brand": "#123456", "shadow": 0x40000000, "named": "navy"})
    assert resolver("brand") == 0xFF123456
    assert resolver("shadow") == 0x40000000
    assert resolver("named") == 0xFF000080
    assert "brand" in resolver
    assert resolver.names() == ["brand", "shadow", "named"]


def test_palette_resolver_rejects_bad_entries():
    with pytest.raises(ColorParseError):
        PaletteResolver({"broken": "#nope"})
    with pytest.raises(ColorParseError):
        PaletteResolver({"huge": 0x1FFFFFFFF})
    with pytest.raises(ColorParseError):
        PaletteResolver({"empty": None})
    with pytest.raises(ColorParseError):
        PaletteResolver({"fraction": 1.5})


def test_palette_resolver_unknown_reference():
    resolver = PaletteResolver({"brand": "#123456"})
    with pytest.raises(ColorLookupError, match="missing"):
        resolver("missing")
    with pytest.raises(KeyError):
        resolver("missing")


def test_palette_resolver_unhashable_reference():
    with pytest.raises(ColorLookupError):
        PaletteResolver()(["brand"])


def test_default_palette():
    resolver = PaletteResolver()
    assert resolver("transparent") == 0
    assert resolver("holo_orange_dark") == DEFAULT_PALETTE["holo_orange_dark"]
