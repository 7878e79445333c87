from __future__ import annotations

from typing import Callable, Dict, Mapping, Tuple, Union

from shapekit.validation import ColorLookupError, ColorParseError

ColorRef = Union[str, int]
ColorResolver = Callable[[ColorRef], int]

TRANSPARENT = 0x00000000

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")

_NAMED_COLORS: Dict[str, int] = {
    "black": 0xFF000000,
    "darkgray": 0xFF444444,
    "gray": 0xFF888888,
    "lightgray": 0xFFCCCCCC,
    "white": 0xFFFFFFFF,
    "red": 0xFFFF0000,
    "green": 0xFF00FF00,
    "blue": 0xFF0000FF,
    "yellow": 0xFFFFFF00,
    "cyan": 0xFF00FFFF,
    "magenta": 0xFFFF00FF,
    "aqua": 0xFF00FFFF,
    "fuchsia": 0xFFFF00FF,
    "darkgrey": 0xFF444444,
    "grey": 0xFF888888,
    "lightgrey": 0xFFCCCCCC,
    "lime": 0xFF00FF00,
    "maroon": 0xFF800000,
    "navy": 0xFF000080,
    "olive": 0xFF808000,
    "purple": 0xFF800080,
    "silver": 0xFFC0C0C0,
    "teal": 0xFF008080,
}

# Mirrors the commonly used android.R.color entries.
DEFAULT_PALETTE: Dict[str, int] = {
    "transparent": TRANSPARENT,
    "black": 0xFF000000,
    "white": 0xFFFFFFFF,
    "darker_gray": 0xFFAAAAAA,
    "holo_blue_light": 0xFF33B5E5,
    "holo_blue_dark": 0xFF0099CC,
    "holo_blue_bright": 0xFF00DDFF,
    "holo_green_light": 0xFF99CC00,
    "holo_green_dark": 0xFF669900,
    "holo_red_light": 0xFFFF4444,
    "holo_red_dark": 0xFFCC0000,
    "holo_orange_light": 0xFFFFBB33,
    "holo_orange_dark": 0xFFFF8800,
    "holo_purple": 0xFFAA66CC,
}


def parse_color(text: str) -> int:
    """Parse ``#RRGGBB``, ``#AARRGGBB`` or a named color into an ARGB int.

    Six-digit values are made fully opaque. Names are matched
    case-insensitively against the standard named colors.
    """

    if not isinstance(text, str):
        raise ColorParseError(f"Color must be a string, got {type(text).__name__}.")
    if text.startswith("#"):
        digits = text[1:]
        if len(digits) not in (6, 8):
            raise ColorParseError(f"Unknown color {text!r}.")
        if any(ch not in _HEX_DIGITS for ch in digits):
            raise ColorParseError(f"Unknown color {text!r}.")
        value = int(digits, 16)
        if len(digits) == 6:
            value |= 0xFF000000
        return value
    named = _NAMED_COLORS.get(text.lower())
    if named is None:
        raise ColorParseError(f"Unknown color {text!r}.")
    return named


def format_color(argb: int) -> str:
    return f"#{argb & 0xFFFFFFFF:08X}"


def to_rgba(argb: int) -> Tuple[float, float, float, float]:
    """Split an ARGB int into (r, g, b, a) floats in [0, 1]."""

    argb &= 0xFFFFFFFF
    a = (argb >> 24) & 0xFF
    r = (argb >> 16) & 0xFF
    g = (argb >> 8) & 0xFF
    b = argb & 0xFF
    return r / 255.0, g / 255.0, b / 255.0, a / 255.0


def _normalize_color(color: int | str) -> int:
    if isinstance(color, bool):
        raise ColorParseError("Color must be an ARGB int or a color string.")
    if isinstance(color, int):
        if not 0 <= color <= 0xFFFFFFFF:
            raise ColorParseError(f"Color value {color:#x} does not fit in 32 bits.")
        return color
    if not isinstance(color, str):
        raise ColorParseError(f"Color must be an ARGB int or a color string, got {color!r}.")
    return parse_color(color.strip())


class PaletteResolver:
    """Resolve named color references against an in-memory palette."""

    def __init__(self, palette: Mapping[ColorRef, int | str] | None = None) -> None:
        source = DEFAULT_PALETTE if palette is None else palette
        self._palette: Dict[ColorRef, int] = {ref: _normalize_color(value) for ref, value in source.items()}

    @classmethod
    def from_config(cls) -> "PaletteResolver":
        from shapekit._config import get_palette

        return cls(get_palette())

    def __call__(self, ref: ColorRef) -> int:
        try:
            return self._palette[ref]
        except (KeyError, TypeError):
            raise ColorLookupError(f"Unknown color reference {ref!r}.") from None

    def __contains__(self, ref: object) -> bool:
        return ref in self._palette

    def names(self) -> list[ColorRef]:
        return list(self._palette)


__all__ = [
    "ColorRef",
    "ColorResolver",
    "DEFAULT_PALETTE",
    "PaletteResolver",
    "TRANSPARENT",
    "format_color",
    "parse_color",
    "to_rgba",
]
