"""Unit → pixel scaling for path fragments and markup.

Relative opcodes are scaled per the rule table below; upper-case
(absolute) opcodes already hold pixel coordinates and pass through.
Markup is only scaled where an attribute holds a fraction in [0, 1].
"""

from __future__ import annotations

import copy
import logging
import xml.etree.ElementTree as ET
from collections.abc import Callable, Iterable

from dungeon.engine.fragments import LiteralOp, Number, RawMarkup, ResolvedFragment
from dungeon.utils.math_helpers import format_number, in_unit_interval, parse_number, round_half_away

logger = logging.getLogger(__name__)

# Markup attribute -> axis it scales along
MARKUP_SCALED_ATTRIBUTES = {"font-size": 0, "x": 0, "y": 1}
MARKUP_POSITION_ATTRIBUTES = ("x", "y")

_ARC_ARITY = 7


def _pairs(args: tuple[Number, ...], sx: float, sy: float) -> tuple[Number, ...] | None:
    if len(args) % 2:
        return None
    return tuple(round_half_away(a * (sx if i % 2 == 0 else sy)) for i, a in enumerate(args))


def _horizontal(args: tuple[Number, ...], sx: float, sy: float) -> tuple[Number, ...] | None:
    return tuple(round_half_away(a * sx) for a in args)


def _vertical(args: tuple[Number, ...], sx: float, sy: float) -> tuple[Number, ...] | None:
    return tuple(round_half_away(a * sy) for a in args)


def _arc(args: tuple[Number, ...], sx: float, sy: float) -> tuple[Number, ...] | None:
    # rx ry rotation large-arc sweep x y: only the endpoint moves
    if not args or len(args) % _ARC_ARITY:
        return None
    out = list(args)
    for i in range(_ARC_ARITY - 2, len(out), _ARC_ARITY):
        out[i] = round_half_away(out[i] * sx)
        out[i + 1] = round_half_away(out[i + 1] * sy)
    return tuple(out)


_RULES: dict[str, Callable[[tuple[Number, ...], float, float], tuple[Number, ...] | None]] = {
    "m": _pairs,
    "l": _pairs,
    "c": _pairs,
    "s": _pairs,
    "q": _pairs,
    "t": _pairs,
    "h": _horizontal,
    "v": _vertical,
    "a": _arc,
}


def scale_op(op: LiteralOp, sx: float, sy: float) -> LiteralOp:
    """Scale a single draw instruction."""
    if op.opcode in ("z", "Z"):
        return op
    if op.is_absolute and op.opcode.lower() in _RULES:
        return op

    rule = _RULES.get(op.opcode)
    if rule is None:
        logger.warning("Unrecognized path opcode %r, passing through unscaled", op.opcode)
        return op

    args = rule(op.args, sx, sy)
    if args is None:
        logger.warning("Malformed arguments for %r: %r, passing through unscaled", op.opcode, op.args)
        return op
    return LiteralOp(op.opcode, args)


def scale_markup(
    element: ET.Element,
    sx: float,
    sy: float,
    origin: tuple[float, float] = (0, 0),
) -> ET.Element:
    """Scale fractional attributes of an element and its descendants in place.

    Positions scaled this way are offset by ``origin``; values outside
    [0, 1] are taken as absolute and left alone.
    """
    factors = (sx, sy)
    for el in element.iter():
        for attr, axis in MARKUP_SCALED_ATTRIBUTES.items():
            raw = el.get(attr)
            if raw is None:
                continue
            value = parse_number(raw)
            if value is None or not in_unit_interval(value):
                continue
            scaled = value * factors[axis]
            if attr in MARKUP_POSITION_ATTRIBUTES:
                scaled += origin[axis]
            el.set(attr, format_number(scaled))
    return element


def nudge(element: ET.Element, dx: float, dy: float) -> ET.Element:
    """Translate x/y attributes of an element and its descendants in place."""
    if not dx and not dy:
        return element
    offsets = {"x": dx, "y": dy}
    for el in element.iter():
        for attr, offset in offsets.items():
            raw = el.get(attr)
            if raw is None:
                continue
            value = parse_number(raw)
            if value is None:
                continue
            el.set(attr, format_number(value + offset))
    return element


def place_markup(
    element: ET.Element,
    sx: float,
    sy: float,
    origin: tuple[float, float],
    offset: tuple[float, float],
) -> ET.Element:
    """Copy an element, scale it into a cell at ``origin``, then nudge it."""
    placed = copy.deepcopy(element)
    scale_markup(placed, sx, sy, origin)
    return nudge(placed, *offset)


def scale(
    fragments: Iterable[ResolvedFragment],
    sx: float,
    sy: float,
    origin: tuple[float, float] = (0, 0),
) -> list[ResolvedFragment]:
    """Scale a resolved fragment sequence from dungeon units to pixels."""
    out: list[ResolvedFragment] = []
    for fragment in fragments:
        if isinstance(fragment, LiteralOp):
            out.append(scale_op(fragment, sx, sy))
        elif isinstance(fragment, RawMarkup):
            element = scale_markup(copy.deepcopy(fragment.element), sx, sy, origin)
            out.append(RawMarkup(element))
        else:
            raise TypeError(f"Cannot scale unresolved fragment: {fragment!r}")
    return out
