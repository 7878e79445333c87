from __future__ import annotations

import xml.etree.ElementTree as ET

from shapekit.io.android_xml import ANDROID_NS, to_android_xml, write_android_xml


def _attr(element: ET.Element, name: str) -> str | None:
    return element.get(f"{{{ANDROID_NS}}}{name}")


def test_solid_rectangle_with_uniform_corners(builder):
    xml = to_android_xml(builder.solid("red").corner(4).build())
    assert xml.startswith('<?xml version="1.0" encoding="utf-8"?>')
    assert 'xmlns:android="http://schemas.android.com/apk/res/android"' in xml
    root = ET.fromstring(xml.split("\n", 1)[1])
    assert root.tag == "shape"
    assert _attr(root, "shape") == "rectangle"
    assert _attr(root.find("corners"), "radius") == "8px"
    assert _attr(root.find("solid"), "color") == "#FFFF0000"
    assert root.find("gradient") is None
    assert root.find("stroke") is None


def test_gradient_oval_with_dashed_stroke(builder):
    descriptor = builder.shape("oval").gradient("red", "blue", 405).stroke("green", 1).dash(2, 3).build()
    root = ET.fromstring(to_android_xml(descriptor).split("\n", 1)[1])
    assert _attr(root, "shape") == "oval"
    gradient = root.find("gradient")
    assert _attr(gradient, "startColor") == "#FFFF0000"
    assert _attr(gradient, "endColor") == "#FF0000FF"
    assert _attr(gradient, "angle") == "45"
    assert _attr(gradient, "type") == "linear"
    assert root.find("solid") is None
    stroke = root.find("stroke")
    assert _attr(stroke, "width") == "2px"
    assert _attr(stroke, "color") == "#FF00FF00"
    assert _attr(stroke, "dashWidth") == "6px"
    assert _attr(stroke, "dashGap") == "4px"


def test_per_corner_radii_attributes(builder):
    root = ET.fromstring(to_android_xml(builder.corners(1, 2, 3, 4).build()).split("\n", 1)[1])
    corners = root.find("corners")
    assert _attr(corners, "topLeftRadius") == "2px"
    assert _attr(corners, "topRightRadius") == "4px"
    assert _attr(corners, "bottomLeftRadius") == "6px"
    assert _attr(corners, "bottomRightRadius") == "8px"
    assert _attr(corners, "radius") is None


def test_write_android_xml(tmp_path, builder):
    path = tmp_path / "ring.xml"
    write_android_xml(builder.shape("ring").build(), path)
    text = path.read_text(encoding="utf-8")
    assert 'android:shape="ring"' in text
    assert text.endswith("\n")
