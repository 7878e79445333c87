from __future__ import annotations

import math


class ShapeError(ValueError):
    """Base error for shape descriptor failures."""


class InvalidArgument(ShapeError):
    """Raised when a builder argument is outside its accepted domain."""


class ColorParseError(ShapeError):
    """Raised when a textual color cannot be parsed."""


class ColorLookupError(ShapeError, KeyError):
    """Raised when a color reference is unknown to the resolver."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""


class RecipeError(ShapeError):
    """Raised when a shape recipe is malformed."""


def validate_gradient_angle(angle: float) -> int:
    """Return ``angle`` as an int, rejecting anything not a multiple of 45."""

    if isinstance(angle, bool) or not isinstance(angle, (int, float)):
        raise InvalidArgument(f"Gradient angle must be a number, got {angle!r}.")
    if not math.isfinite(angle) or angle % 45 != 0:
        raise InvalidArgument(f"Gradient angle must be a multiple of 45, got {angle!r}.")
    return int(angle)
