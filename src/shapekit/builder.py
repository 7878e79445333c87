"""Fluent builder for :class:`~shapekit.descriptor.ShapeDescriptor`.

Every setter returns a new builder, so partially configured builders can be
shared and branched freely::

    base = ShapeBuilder(density=2.0).corner(8).solid("white")
    outlined = base.stroke_text("#FF0000", 1)
    descriptor = outlined.build()

All dimensions are given in density-independent units and multiplied by
``density`` when stored.
"""

from __future__ import annotations

import math
import warnings
from dataclasses import dataclass, field, replace
from typing import Protocol, Tuple

from shapekit._config import default_density
from shapekit.colors import ColorRef, ColorResolver, PaletteResolver, TRANSPARENT, parse_color
from shapekit.descriptor import (
    Dash,
    Fill,
    GradientFill,
    Orientation,
    ShapeDescriptor,
    ShapeKind,
    SolidFill,
    Stroke,
)
from shapekit.validation import ColorParseError, InvalidArgument, validate_gradient_angle


class DrawableBuilder(Protocol):
    def build(self) -> ShapeDescriptor:
        ...


def _coerce_shape_kind(kind: ShapeKind | str | int) -> ShapeKind:
    if isinstance(kind, ShapeKind):
        return kind
    if isinstance(kind, str):
        try:
            return ShapeKind[kind.strip().upper()]
        except KeyError:
            pass
    elif isinstance(kind, int) and not isinstance(kind, bool):
        try:
            return ShapeKind(kind)
        except ValueError:
            pass
    names = ", ".join(k.name.lower() for k in ShapeKind)
    raise InvalidArgument(f"Unknown shape kind {kind!r}; expected one of {names}.")


def _round_width(width: float) -> int:
    return int(math.floor(width + 0.5))


@dataclass(frozen=True)
class ShapeBuilder:
    """Accumulates shape parameters and builds a :class:`ShapeDescriptor`."""

    density: float = field(default_factory=default_density)
    resolver: ColorResolver = field(default_factory=PaletteResolver.from_config, repr=False, compare=False)
    shape_kind: ShapeKind = ShapeKind.RECTANGLE
    uniform_corner_radius: float = 0.0
    per_corner_radii: Tuple[float, ...] | None = None
    stroke_width: float = 0.0
    stroke_color: int = TRANSPARENT
    dash_width: float = 0.0
    dash_gap: float = 0.0
    fill_color: int = TRANSPARENT
    gradient_colors: Tuple[int, int] | None = None
    gradient_angle: int = 0

    def corner(self, radius: float) -> "ShapeBuilder":
        """Round all four corners with the same radius."""
        return replace(self, uniform_corner_radius=radius * self.density)

    def corners(
        self,
        top_left: float,
        top_right: float,
        bottom_left: float,
        bottom_right: float,
    ) -> "ShapeBuilder":
        """Round each corner separately.

        Note the argument order differs from the stored order, which walks the
        corners clockwise from the top-left.
        """
        tl = top_left * self.density
        tr = top_right * self.density
        bl = bottom_left * self.density
        br = bottom_right * self.density
        return replace(self, per_corner_radii=(tl, tl, tr, tr, br, br, bl, bl))

    def solid(self, color_ref: ColorRef) -> "ShapeBuilder":
        return replace(self, fill_color=self.resolver(color_ref))

    def shape(self, kind: ShapeKind | str | int) -> "ShapeBuilder":
        return replace(self, shape_kind=_coerce_shape_kind(kind))

    def stroke(self, color_ref: ColorRef, width: float) -> "ShapeBuilder":
        return replace(self, stroke_width=width * self.density, stroke_color=self.resolver(color_ref))

    def stroke_text(self, color_text: str, width: float, *, strict: bool = False) -> "ShapeBuilder":
        """Set the stroke from a textual color such as ``"#RRGGBB"``.

        The width always applies. Blank text keeps the current stroke color.
        Unparseable text also keeps it and emits a ``RuntimeWarning``, unless
        ``strict`` is set, in which case :class:`ColorParseError` is raised.
        """
        updated = replace(self, stroke_width=width * self.density)
        if not color_text or not color_text.strip():
            return updated
        try:
            color = parse_color(color_text.strip())
        except ColorParseError as exc:
            if strict:
                raise
            warnings.warn(f"Ignoring stroke color: {exc}", RuntimeWarning, stacklevel=2)
            return updated
        return replace(updated, stroke_color=color)

    def stroke_int(self, width: float, color_value: int) -> "ShapeBuilder":
        return replace(self, stroke_width=width * self.density, stroke_color=color_value)

    def dash(self, gap: float, width: float) -> "ShapeBuilder":
        """Dash the stroke; both values must be non-zero to take effect."""
        return replace(self, dash_gap=gap * self.density, dash_width=width * self.density)

    def gradient(self, start_ref: ColorRef, end_ref: ColorRef, angle: int = 0) -> "ShapeBuilder":
        """Fill with a two-color linear gradient.

        ``angle`` must be a multiple of 45: 0 runs left to right, 90 bottom to
        top, and so on counter-clockwise. The gradient replaces any solid fill.
        """
        angle = validate_gradient_angle(angle)
        colors = (self.resolver(start_ref), self.resolver(end_ref))
        return replace(self, gradient_colors=colors, gradient_angle=angle)

    def build(self) -> ShapeDescriptor:
        fill: Fill
        if self.gradient_colors is not None:
            start, end = self.gradient_colors
            fill = GradientFill(
                start_color=start,
                end_color=end,
                angle=self.gradient_angle,
                orientation=Orientation.from_angle(self.gradient_angle),
            )
        else:
            fill = SolidFill(self.fill_color)

        stroke = None
        if self.stroke_width != 0:
            dash = None
            if self.dash_width != 0 and self.dash_gap != 0:
                dash = Dash(width=self.dash_width, gap=self.dash_gap)
            stroke = Stroke(width=_round_width(self.stroke_width), color=self.stroke_color, dash=dash)

        corner_radius = None
        corner_radii = None
        if self.uniform_corner_radius != 0:
            corner_radius = float(self.uniform_corner_radius)
        elif self.per_corner_radii is not None:
            corner_radii = self.per_corner_radii

        return ShapeDescriptor(
            kind=self.shape_kind,
            fill=fill,
            stroke=stroke,
            corner_radius=corner_radius,
            corner_radii=corner_radii,
        )


__all__ = ["DrawableBuilder", "ShapeBuilder"]
