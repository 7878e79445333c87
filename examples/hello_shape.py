"""Build a pill-shaped button background and print it as an Android drawable."""

from __future__ import annotations

from shapekit import ShapeBuilder
from shapekit.io import to_android_xml


def build():
    """Rounded, outlined pill with a vertical gradient at xhdpi."""

    return (
        ShapeBuilder(density=2.0)
        .corner(24)
        .gradient("holo_blue_light", "holo_blue_dark", 90)
        .stroke_text("#FF0D47A1", 1)
        .build()
    )


if __name__ == "__main__":
    print(to_android_xml(build()))
