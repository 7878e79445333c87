"""Writers that hand shape descriptors to external rendering backends."""

from __future__ import annotations

from .android_xml import to_android_xml, write_android_xml

__all__ = ["to_android_xml", "write_android_xml"]
