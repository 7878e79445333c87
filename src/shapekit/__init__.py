"""shapekit – fluent builders for 2D shape drawables."""

from __future__ import annotations

from .builder import DrawableBuilder, ShapeBuilder
from .colors import PaletteResolver, format_color, parse_color
from .descriptor import (
    Dash,
    GradientFill,
    Orientation,
    ShapeDescriptor,
    ShapeKind,
    SolidFill,
    Stroke,
)
from .validation import (
    ColorLookupError,
    ColorParseError,
    InvalidArgument,
    RecipeError,
    ShapeError,
)

__all__ = [
    "__version__",
    "ColorLookupError",
    "ColorParseError",
    "Dash",
    "DrawableBuilder",
    "GradientFill",
    "InvalidArgument",
    "Orientation",
    "PaletteResolver",
    "RecipeError",
    "ShapeBuilder",
    "ShapeDescriptor",
    "ShapeError",
    "ShapeKind",
    "SolidFill",
    "Stroke",
    "format_color",
    "parse_color",
]

__version__ = "0.1.0"
