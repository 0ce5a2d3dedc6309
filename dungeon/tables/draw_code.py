"""Draw-code text → path fragments.

Tokens are separated by whitespace or commas:

    m 1 0 l 0 1           draw instructions (letter, then its numbers)
    wall door-north       tile references
    (1, 0)  @(3, 4)       relative and absolute cell references
    <text x="0.5">A</text>   markup fragments

Numbers following an instruction beyond its arity repeat the instruction,
so ``l 1 0 0 1`` reads as ``l 1 0 l 0 1``. An instruction may also be glued
to its first number as in SVG path data: ``l-1 1`` reads as ``l -1 1``.
"""

from __future__ import annotations

import re

from dungeon.engine.fragments import CellRef, LiteralOp, PathFragment, Position, RawMarkup, TagEntry, TileRef
from dungeon.svg.markup import markup_end, parse_markup
from dungeon.utils.math_helpers import parse_number

# Arguments per instruction, keyed by lower-case opcode
OPCODE_ARITY = {"m": 2, "l": 2, "h": 1, "v": 1, "a": 7, "c": 6, "s": 4, "q": 4, "t": 2, "z": 0}

_NUMBER = r"[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?"

_TOKEN_RE = re.compile(
    rf"""
    (?P<cell>(?P<abs>@)?\(\s*(?P<dx>[-+]?\d+)\s*[,\s]\s*(?P<dy>[-+]?\d+)\s*\))
    |(?P<number>{_NUMBER})
    |(?P<word>[A-Za-z_][\w.-]*)
    |(?P<sep>[\s,]+)
    |(?P<bad>.)
    """,
    re.VERBOSE | re.DOTALL,
)

# SVG's compact form: an instruction letter glued to its first number ("l-1")
_COMPACT_OP_RE = re.compile(rf"^(?P<op>[MmLlHhVvAaCcSsQqTt])(?P<number>{_NUMBER})$")

_POSITION_RE = re.compile(r"^\(?\s*([-+]?\d+)\s*(?:,\s*|\s+)([-+]?\d+)\s*\)?$")
_TAG_SPLIT_RE = re.compile(r"[\s;]+")

# (kind, text, match); markup tokens carry no match
Token = tuple[str, str, "re.Match[str] | None"]


def tokenize(text: str) -> list[Token]:
    tokens: list[Token] = []
    pos = 0
    while pos < len(text):
        if text[pos] == "<":
            end = markup_end(text, pos)
            tokens.append(("markup", text[pos:end], None))
            pos = end
            continue

        m = _TOKEN_RE.match(text, pos)
        kind, value = m.lastgroup, m.group(0)
        pos = m.end()
        if kind == "sep":
            continue
        if kind == "bad":
            raise ValueError(f"Unexpected character {value!r} at {m.start()} in draw code {text!r}")

        compact = _COMPACT_OP_RE.match(value) if kind == "word" else None
        if compact:
            tokens.append(("word", compact.group("op"), None))
            tokens.append(("number", compact.group("number"), None))
        else:
            tokens.append((kind, value, m))
    return tokens


def parse_draw_code(text: str) -> tuple[PathFragment, ...]:
    """Parse one category's draw code."""
    tokens = tokenize(text)
    fragments: list[PathFragment] = []
    i = 0

    while i < len(tokens):
        kind, value, m = tokens[i]
        i += 1

        if kind == "markup":
            fragments.append(RawMarkup(parse_markup(value)))
        elif kind == "cell":
            fragments.append(CellRef(int(m.group("dx")), int(m.group("dy")), absolute=bool(m.group("abs"))))
        elif kind == "word":
            next_is_number = i < len(tokens) and tokens[i][0] == "number"
            if len(value) == 1 and (next_is_number or value.lower() == "z"):
                args: list[int | float] = []
                while i < len(tokens) and tokens[i][0] == "number":
                    args.append(parse_number(tokens[i][1]))
                    i += 1
                fragments.extend(_split_op(value, args))
            else:
                fragments.append(TileRef(value))
        else:
            raise ValueError(f"Number {value} without an instruction in draw code {text!r}")

    return tuple(fragments)


def _split_op(opcode: str, args: list[int | float]) -> list[LiteralOp]:
    arity = OPCODE_ARITY.get(opcode.lower())
    if not arity or len(args) <= arity or len(args) % arity:
        return [LiteralOp(opcode, tuple(args))]
    return [LiteralOp(opcode, tuple(args[i:i + arity])) for i in range(0, len(args), arity)]


def parse_tags(text: str) -> tuple[TagEntry, ...]:
    """Parse ``tag:normal:inverted`` entries; either tile id may be left empty."""
    entries: list[TagEntry] = []
    for item in _TAG_SPLIT_RE.split(text.strip()):
        if not item:
            continue
        name, _, rest = item.partition(":")
        normal, _, inverted = rest.partition(":")
        if not name:
            raise ValueError(f"Tag entry without a name: {item!r}")
        entries.append(
            TagEntry(
                tag=name,
                normal=TileRef(normal) if normal else None,
                inverted=TileRef(inverted) if inverted else None,
            )
        )
    return tuple(entries)


def parse_position(text: str) -> Position:
    """Parse a cell key such as ``3,4``, ``3 4`` or ``(3, 4)``."""
    m = _POSITION_RE.match(text.strip())
    if not m:
        raise ValueError(f"Invalid cell position: {text!r}")
    return (int(m.group(1)), int(m.group(2)))
