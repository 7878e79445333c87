from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Sequence

import numpy as np

from shapekit.descriptor import ShapeDescriptor, ShapeKind, Stroke

# Android's default ring proportions: inner radius = width / 3, thickness = width / 9.
RING_INNER_RADIUS_RATIO = 3.0
RING_THICKNESS_RATIO = 9.0


def _require_vec2(value: Sequence[float], label: str) -> np.ndarray:
    try:
        arr = np.asarray(value, dtype=float).reshape(2)
    except Exception as exc:
        raise ValueError(f"{label} must be a 2D coordinate.") from exc
    if not np.all(np.isfinite(arr)):
        raise ValueError(f"{label} must be finite.")
    return arr


@dataclass(frozen=True)
class Line2D:
    start: np.ndarray
    end: np.ndarray

    def __post_init__(self) -> None:
        object.__setattr__(self, "start", _require_vec2(self.start, "start"))
        object.__setattr__(self, "end", _require_vec2(self.end, "end"))

    def sample(self) -> np.ndarray:
        return np.vstack([self.start, self.end])


@dataclass(frozen=True)
class Arc2D:
    """Elliptical arc; angles in degrees, y axis pointing down."""

    center: np.ndarray
    radius_x: float
    radius_y: float
    start_angle_deg: float
    end_angle_deg: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "center", _require_vec2(self.center, "center"))
        for label, radius in (("radius_x", self.radius_x), ("radius_y", self.radius_y)):
            if not np.isfinite(radius) or radius <= 0:
                raise ValueError(f"{label} must be positive.")

    def sample(self, segments_per_circle: int) -> np.ndarray:
        if segments_per_circle < 3:
            raise ValueError("segments_per_circle must be >= 3.")
        start = np.deg2rad(self.start_angle_deg)
        end = np.deg2rad(self.end_angle_deg)
        if end < start:
            end += 2 * np.pi
        span = abs(end - start)
        steps = max(int(np.ceil(segments_per_circle * (span / (2 * np.pi)))), 2)
        angles = np.linspace(start, end, steps, endpoint=True)
        x = self.center[0] + self.radius_x * np.cos(angles)
        y = self.center[1] + self.radius_y * np.sin(angles)
        return np.column_stack([x, y])


Segment2D = Line2D | Arc2D


@dataclass
class Path2D:
    segments: List[Segment2D] = field(default_factory=list)
    closed: bool = False

    def sample(self, segments_per_circle: int = 64) -> np.ndarray:
        if not self.segments:
            return np.zeros((0, 2), dtype=float)
        points = []
        for idx, segment in enumerate(self.segments):
            if isinstance(segment, Line2D):
                seg_points = segment.sample()
            else:
                seg_points = segment.sample(segments_per_circle)
            if idx > 0 and seg_points.shape[0] > 0:
                seg_points = seg_points[1:]
            points.append(seg_points)
        pts = np.vstack(points)
        if self.closed and pts.shape[0] > 0 and not np.allclose(pts[0], pts[-1]):
            pts = np.vstack([pts, pts[0]])
        return pts

    def length(self, segments_per_circle: int = 64) -> float:
        pts = self.sample(segments_per_circle)
        if pts.shape[0] < 2:
            return 0.0
        return float(np.linalg.norm(np.diff(pts, axis=0), axis=1).sum())

    def dashes(self, width: float, gap: float, segments_per_circle: int = 64) -> list[np.ndarray]:
        """Split the sampled path into dash runs of ``width`` separated by ``gap``."""

        if width <= 0 or gap <= 0:
            raise ValueError("dash width and gap must be positive.")
        pts = self.sample(segments_per_circle)
        if pts.shape[0] < 2:
            return []
        distances = np.concatenate([[0.0], np.cumsum(np.linalg.norm(np.diff(pts, axis=0), axis=1))])
        total = distances[-1]
        runs: list[np.ndarray] = []
        start = 0.0
        while start < total:
            end = min(start + width, total)
            inner = distances[(distances > start) & (distances < end)]
            stops = np.concatenate([[start], inner, [end]])
            xs = np.interp(stops, distances, pts[:, 0])
            ys = np.interp(stops, distances, pts[:, 1])
            runs.append(np.column_stack([xs, ys]))
            start += width + gap
        return runs


@dataclass
class ShapeOutline:
    """Paths a backend fills and strokes for one descriptor at a given size."""

    kind: ShapeKind
    size: tuple[float, float]
    paths: List[Path2D]
    stroke: Stroke | None = None

    @property
    def outer(self) -> Path2D:
        return self.paths[0]

    @property
    def holes(self) -> List[Path2D]:
        return self.paths[1:]

    def to_dict(self, segments_per_circle: int = 64) -> dict[str, object]:
        data: dict[str, object] = {
            "shape": self.kind.name.lower(),
            "size": [float(self.size[0]), float(self.size[1])],
            "paths": [
                {"closed": path.closed, "points": path.sample(segments_per_circle).round(4).tolist()}
                for path in self.paths
            ],
        }
        dash = self.stroke.dash if self.stroke is not None else None
        # Backends draw non-positive dash patterns as a solid stroke.
        if dash is not None and dash.width > 0 and dash.gap > 0:
            data["dashes"] = [
                [run.round(4).tolist() for run in path.dashes(dash.width, dash.gap, segments_per_circle)]
                for path in self.paths
            ]
        return data


def _corner_arc(cx: float, cy: float, rx: float, ry: float, start: float) -> Arc2D:
    return Arc2D(center=(cx, cy), radius_x=rx, radius_y=ry, start_angle_deg=start, end_angle_deg=start + 90.0)


def _clamped_radii(descriptor: ShapeDescriptor, width: float, height: float) -> np.ndarray:
    """Return per-corner (rx, ry) rows for tl, tr, br, bl, fitted to the bounds."""

    if descriptor.corner_radius is not None:
        r = min(max(descriptor.corner_radius, 0.0), width / 2.0, height / 2.0)
        return np.full((4, 2), r, dtype=float)
    if descriptor.corner_radii is None:
        return np.zeros((4, 2), dtype=float)

    radii = np.clip(np.asarray(descriptor.corner_radii, dtype=float).reshape(4, 2), 0.0, None)
    tl, tr, br, bl = radii
    factor = 1.0
    for span, total in (
        (width, tl[0] + tr[0]),
        (width, bl[0] + br[0]),
        (height, tl[1] + bl[1]),
        (height, tr[1] + br[1]),
    ):
        if total > span:
            factor = min(factor, span / total)
    return radii * factor


def _rounded_rect(descriptor: ShapeDescriptor, width: float, height: float) -> Path2D:
    radii = _clamped_radii(descriptor, width, height)
    # Clockwise from the top-left corner: (corner x, corner y, x sign, y sign, arc start).
    corners = (
        (0.0, 0.0, 1.0, 1.0, 180.0),
        (width, 0.0, -1.0, 1.0, 270.0),
        (width, height, -1.0, -1.0, 0.0),
        (0.0, height, 1.0, -1.0, 90.0),
    )
    anchors: list[tuple[np.ndarray, np.ndarray, Arc2D | None]] = []
    for (x, y, sx, sy, start), (rx, ry) in zip(corners, radii):
        if rx > 0 and ry > 0:
            arc = _corner_arc(x + sx * rx, y + sy * ry, rx, ry, start)
            pts = arc.sample(4)
            anchors.append((pts[0], pts[-1], arc))
        else:
            point = np.array([x, y], dtype=float)
            anchors.append((point, point, None))

    segments: list[Segment2D] = []
    for idx, (entry, exit_, arc) in enumerate(anchors):
        if arc is not None:
            segments.append(arc)
        next_entry = anchors[(idx + 1) % len(anchors)][0]
        if not np.allclose(exit_, next_entry):
            segments.append(Line2D(exit_, next_entry))
    return Path2D(segments=segments, closed=True)


def outline(
    descriptor: ShapeDescriptor,
    size: Sequence[float],
    segments_per_circle: int = 64,
) -> ShapeOutline:
    """Compute the outline of ``descriptor`` inside a ``size`` bounding box.

    Coordinates are device units with the origin at the top-left corner and
    the y axis pointing down.

    Ring radii derive from the width alone, so a ring in a box shorter than
    8/9 of its width extends past the top and bottom edges, as on Android.
    """

    width, height = (float(v) for v in _require_vec2(size, "size"))
    if width <= 0 or height <= 0:
        raise ValueError("size must be positive.")
    if segments_per_circle < 3:
        raise ValueError("segments_per_circle must be >= 3.")

    center = (width / 2.0, height / 2.0)
    kind = descriptor.kind
    if kind is ShapeKind.OVAL:
        arc = Arc2D(center=center, radius_x=width / 2.0, radius_y=height / 2.0, start_angle_deg=0.0, end_angle_deg=360.0)
        paths = [Path2D(segments=[arc], closed=True)]
    elif kind is ShapeKind.LINE:
        paths = [Path2D(segments=[Line2D((0.0, center[1]), (width, center[1]))], closed=False)]
    elif kind is ShapeKind.RING:
        inner_radius = width / RING_INNER_RADIUS_RATIO
        outer_radius = inner_radius + width / RING_THICKNESS_RATIO
        paths = [
            Path2D(
                segments=[Arc2D(center=center, radius_x=radius, radius_y=radius, start_angle_deg=0.0, end_angle_deg=360.0)],
                closed=True,
            )
            for radius in (outer_radius, inner_radius)
        ]
    else:
        paths = [_rounded_rect(descriptor, width, height)]

    return ShapeOutline(kind=kind, size=(width, height), paths=paths, stroke=descriptor.stroke)


__all__ = [
    "Arc2D",
    "Line2D",
    "Path2D",
    "RING_INNER_RADIUS_RATIO",
    "RING_THICKNESS_RATIO",
    "ShapeOutline",
    "outline",
]
