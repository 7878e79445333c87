from __future__ import annotations

from pathlib import Path
import xml.etree.ElementTree as ET

from shapekit.colors import format_color
from shapekit.descriptor import GradientFill, ShapeDescriptor

ANDROID_NS = "http://schemas.android.com/apk/res/android"

ET.register_namespace("android", ANDROID_NS)


def _attr(name: str) -> str:
    return f"{{{ANDROID_NS}}}{name}"


def _px(value: float) -> str:
    return f"{float(value):g}px"


def to_android_xml(descriptor: ShapeDescriptor) -> str:
    """Render ``descriptor`` as an Android ``<shape>`` drawable document."""

    root = ET.Element("shape", {_attr("shape"): descriptor.kind.name.lower()})

    if descriptor.corner_radius is not None:
        ET.SubElement(root, "corners", {_attr("radius"): _px(descriptor.corner_radius)})
    elif descriptor.corner_radii is not None:
        radii = descriptor.corner_radii
        ET.SubElement(
            root,
            "corners",
            {
                _attr("topLeftRadius"): _px(radii[0]),
                _attr("topRightRadius"): _px(radii[2]),
                _attr("bottomLeftRadius"): _px(radii[6]),
                _attr("bottomRightRadius"): _px(radii[4]),
            },
        )

    fill = descriptor.fill
    if isinstance(fill, GradientFill):
        ET.SubElement(
            root,
            "gradient",
            {
                _attr("startColor"): format_color(fill.start_color),
                _attr("endColor"): format_color(fill.end_color),
                _attr("angle"): str(fill.orientation.angle),
                _attr("type"): "linear",
            },
        )
    else:
        ET.SubElement(root, "solid", {_attr("color"): format_color(fill.color)})

    stroke = descriptor.stroke
    if stroke is not None:
        attrs = {
            _attr("width"): _px(stroke.width),
            _attr("color"): format_color(stroke.color),
        }
        if stroke.dash is not None:
            attrs[_attr("dashWidth")] = _px(stroke.dash.width)
            attrs[_attr("dashGap")] = _px(stroke.dash.gap)
        ET.SubElement(root, "stroke", attrs)

    ET.indent(root, space="    ")
    body = ET.tostring(root, encoding="unicode")
    return '<?xml version="1.0" encoding="utf-8"?>\n' + body + "\n"


def write_android_xml(descriptor: ShapeDescriptor, path: Path) -> None:
    path = Path(path)
    path.write_text(to_android_xml(descriptor), encoding="utf-8")
