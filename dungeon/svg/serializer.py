"""Write SVG path data and the final document from scaled fragments."""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from collections.abc import Iterable
from typing import TYPE_CHECKING

from dungeon.engine.fragments import LiteralOp, RawMarkup, ResolvedFragment
from dungeon.svg.canvas import VectorCanvas
from dungeon.utils.math_helpers import format_number

if TYPE_CHECKING:
    from dungeon.engine.config import RenderConfig
    from dungeon.engine.context import RenderResult

logger = logging.getLogger(__name__)


def format_op(op: LiteralOp) -> str:
    return " ".join([op.opcode, *(format_number(a) for a in op.args)])


def serialize(fragments: Iterable[ResolvedFragment]) -> tuple[str, list[ET.Element]]:
    """Split a scaled sequence into path data and the markup drawn beside it."""
    commands: list[str] = []
    markup: list[ET.Element] = []

    for fragment in fragments:
        if isinstance(fragment, LiteralOp):
            commands.append(format_op(fragment))
        elif isinstance(fragment, RawMarkup):
            markup.append(fragment.element)
        else:
            logger.warning("Unexpected fragment in path output: %r", fragment)

    return " ".join(commands), markup


def render_svg(result: "RenderResult", config: "RenderConfig") -> str:
    """Build the SVG document for a composed level."""
    canvas = VectorCanvas(result.width, result.height)

    if result.grid:
        canvas.path(result.grid, config.attributes_for("grid"), id="grid")

    canvas.path(result.main.d, config.attributes_for(result.main.category), id=result.main.category)

    for category, layer in result.layers.items():
        if layer.d:
            canvas.path(layer.d, config.attributes_for(category), id=category)

    for element in result.main.markup:
        canvas.append(element)
    for layer in result.layers.values():
        for element in layer.markup:
            canvas.append(element)
    for element in result.overlays:
        canvas.append(element)

    return canvas.to_string()
