"""Markup fragments: authored SVG snippets carried through the render untouched."""

from __future__ import annotations

import logging
import re
import xml.etree.ElementTree as ET

logger = logging.getLogger(__name__)

SVG_NS = "http://www.w3.org/2000/svg"

# One start, end or self-closing tag; quoted attribute values may contain ">"
TAG_RE = re.compile(r"""<(?P<close>/)?(?P<name>\w[\w:-]*)\b(?:"[^"]*"|'[^']*'|[^'">])*?(?P<empty>/)?>""")


class MarkupError(ValueError):
    """Raised when authored markup isn't well-formed XML."""


def parse_markup(text: str) -> ET.Element:
    """Parse a single markup fragment into an element."""
    try:
        element = ET.fromstring(text.strip())
    except ET.ParseError as e:
        raise MarkupError(f"Malformed markup {text.strip()[:60]!r}: {e}") from e
    _strip_namespace(element)
    return element


def markup_end(text: str, start: int) -> int:
    """Index just past the element whose start tag begins at ``start``.

    Nested elements are matched by depth, so ``<g><g/></g>`` and
    ``<g><g></g></g>`` are each taken whole.
    """
    depth = 0
    pos = start
    while True:
        m = TAG_RE.search(text, pos)
        if m is None or (depth == 0 and m.start() != start):
            raise MarkupError(f"Unclosed markup {text[start:start + 60]!r}")
        if m.group("close"):
            depth -= 1
        elif not m.group("empty"):
            depth += 1
        if depth <= 0:
            return m.end()
        pos = m.end()


def parse_markup_list(text: str) -> list[ET.Element]:
    """Parse every markup fragment found in ``text``, in order."""
    elements: list[ET.Element] = []
    pos = 0
    while True:
        start = text.find("<", pos)
        leftover = text[pos:] if start < 0 else text[pos:start]
        if leftover.strip():
            raise MarkupError(f"Unexpected text outside markup: {leftover.strip()[:60]!r}")
        if start < 0:
            return elements
        end = markup_end(text, start)
        elements.append(parse_markup(text[start:end]))
        pos = end


def _strip_namespace(element: ET.Element) -> None:
    """Drop the SVG namespace so serialized output stays prefix-free."""
    prefix = f"{{{SVG_NS}}}"
    for el in element.iter():
        if isinstance(el.tag, str) and el.tag.startswith(prefix):
            el.tag = el.tag[len(prefix):]
