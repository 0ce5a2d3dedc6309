"""VectorCanvas: a thin SVG document builder over ElementTree."""

from __future__ import annotations

import xml.etree.ElementTree as ET

from dungeon.svg.markup import SVG_NS


class VectorCanvas:
    """Collects elements into an ``<svg>`` root."""

    def __init__(self, width: int, height: int) -> None:
        self.root = ET.Element(
            "svg",
            {
                "xmlns": SVG_NS,
                "width": str(width),
                "height": str(height),
                "viewBox": f"0 0 {width} {height}",
            },
        )

    def element(self, tag: str, attributes: dict[str, str] | None = None, **extra: str) -> ET.Element:
        el = ET.Element(tag, {**(attributes or {}), **extra})
        return self.append(el)

    def path(self, d: str, attributes: dict[str, str] | None = None, **extra: str) -> ET.Element:
        return self.element("path", attributes, d=d, **extra)

    def append(self, element: ET.Element, parent: ET.Element | None = None) -> ET.Element:
        (self.root if parent is None else parent).append(element)
        return element

    def to_string(self) -> str:
        return ET.tostring(self.root, encoding="unicode")
