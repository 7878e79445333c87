"""Immutable shape descriptors produced by :class:`shapekit.builder.ShapeBuilder`."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Tuple, Union

from shapekit.colors import format_color


class ShapeKind(IntEnum):
    """Closed set of shape kinds; values match android GradientDrawable."""

    RECTANGLE = 0
    OVAL = 1
    LINE = 2
    RING = 3


class Orientation(Enum):
    """Gradient direction, named as start -> end."""

    LEFT_RIGHT = "left_right"
    BL_TR = "bl_tr"
    BOTTOM_TOP = "bottom_top"
    BR_TL = "br_tl"
    RIGHT_LEFT = "right_left"
    TR_BL = "tr_bl"
    TOP_BOTTOM = "top_bottom"
    TL_BR = "tl_br"

    @classmethod
    def from_angle(cls, angle: int) -> "Orientation":
        """Map a gradient angle to its orientation.

        The residual is taken with the sign of ``angle`` so negative angles
        never match a table entry and fall back to ``LEFT_RIGHT``, as do any
        residuals that are not multiples of 45.
        """

        angle = int(angle)
        residual = abs(angle) % 360
        if angle < 0 and residual:
            return cls.LEFT_RIGHT
        if residual % 45 != 0:
            return cls.LEFT_RIGHT
        return ORIENTATION_TABLE[residual // 45]

    @property
    def angle(self) -> int:
        return ORIENTATION_TABLE.index(self) * 45


# Index i holds the orientation for angle i * 45.
ORIENTATION_TABLE: Tuple[Orientation, ...] = (
    Orientation.LEFT_RIGHT,
    Orientation.BL_TR,
    Orientation.BOTTOM_TOP,
    Orientation.BR_TL,
    Orientation.RIGHT_LEFT,
    Orientation.TR_BL,
    Orientation.TOP_BOTTOM,
    Orientation.TL_BR,
)


@dataclass(frozen=True)
class SolidFill:
    color: int


@dataclass(frozen=True)
class GradientFill:
    start_color: int
    end_color: int
    angle: int
    orientation: Orientation

    @property
    def colors(self) -> Tuple[int, int]:
        return self.start_color, self.end_color


Fill = Union[SolidFill, GradientFill]


@dataclass(frozen=True)
class Dash:
    width: float
    gap: float


@dataclass(frozen=True)
class Stroke:
    width: int
    color: int
    dash: Dash | None = None

    @property
    def dashed(self) -> bool:
        return self.dash is not None


@dataclass(frozen=True)
class ShapeDescriptor:
    """Fully resolved rendering parameters for one shape.

    At most one of ``corner_radius`` and ``corner_radii`` is set. Radii are
    stored as (x, y) pairs for the top-left, top-right, bottom-right and
    bottom-left corners, in device units.
    """

    kind: ShapeKind = ShapeKind.RECTANGLE
    fill: Fill = SolidFill(0)
    stroke: Stroke | None = None
    corner_radius: float | None = None
    corner_radii: Tuple[float, ...] | None = None

    def __post_init__(self) -> None:
        if self.corner_radius is not None and self.corner_radii is not None:
            raise ValueError("Specify either corner_radius or corner_radii, not both.")
        if self.corner_radii is not None:
            radii = tuple(float(r) for r in self.corner_radii)
            if len(radii) != 8:
                raise ValueError("corner_radii must hold 8 values.")
            object.__setattr__(self, "corner_radii", radii)

    @property
    def is_gradient(self) -> bool:
        return isinstance(self.fill, GradientFill)

    def summary(self) -> dict[str, object]:
        """Return a flat, printable view of the descriptor."""

        data: dict[str, object] = {"shape": self.kind.name.lower()}
        if isinstance(self.fill, GradientFill):
            data["gradient"] = (
                f"{format_color(self.fill.start_color)} -> {format_color(self.fill.end_color)} "
                f"({self.fill.orientation.name}, {self.fill.angle} deg)"
            )
        else:
            data["solid"] = format_color(self.fill.color)
        if self.stroke is not None:
            stroke = f"{self.stroke.width}px {format_color(self.stroke.color)}"
            if self.stroke.dash is not None:
                stroke += f" dash {self.stroke.dash.width:g}/{self.stroke.dash.gap:g}"
            data["stroke"] = stroke
        if self.corner_radius is not None:
            data["corner_radius"] = f"{self.corner_radius:g}"
        elif self.corner_radii is not None:
            data["corner_radii"] = ", ".join(f"{r:g}" for r in self.corner_radii)
        return data


__all__ = [
    "Dash",
    "Fill",
    "GradientFill",
    "ORIENTATION_TABLE",
    "Orientation",
    "ShapeDescriptor",
    "ShapeKind",
    "SolidFill",
    "Stroke",
]
