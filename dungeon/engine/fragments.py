"""Path fragments and the tile/cell records that hold them.

A category's draw code is an ordered tuple of fragments:

    LiteralOp("m", (1, 0))    draw instruction
    TileRef("wall")           splice in another tile
    CellRef(1, 0)             splice in a neighbouring cell
    RawMarkup(<text .../>)    pre-parsed SVG element
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from typing import Union

Number = Union[int, float]
Position = tuple[int, int]


@dataclass(frozen=True)
class LiteralOp:
    opcode: str
    args: tuple[Number, ...] = ()

    @property
    def is_absolute(self) -> bool:
        return self.opcode.isupper()


@dataclass(frozen=True)
class TileRef:
    tile_id: str


@dataclass(frozen=True)
class CellRef:
    dx: int
    dy: int
    # True when (dx, dy) is a map position rather than an offset
    absolute: bool = False

    def target(self, origin: Position) -> Position:
        if self.absolute:
            return (self.dx, self.dy)
        return (origin[0] + self.dx, origin[1] + self.dy)


@dataclass(frozen=True, eq=False)
class RawMarkup:
    element: ET.Element

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RawMarkup):
            return NotImplemented
        return ET.tostring(self.element) == ET.tostring(other.element)

    def __hash__(self) -> int:
        return hash(ET.tostring(self.element))


PathFragment = Union[LiteralOp, TileRef, CellRef, RawMarkup]
ResolvedFragment = Union[LiteralOp, RawMarkup]


@dataclass(frozen=True)
class TagEntry:
    """A tag with the fragment drawn when it is active and when it is not."""

    tag: str
    normal: PathFragment | None = None
    inverted: PathFragment | None = None


@dataclass
class Tile:
    id: str
    # category name -> fragments
    paths: dict[str, tuple[PathFragment, ...]] = field(default_factory=dict)
    tags: tuple[TagEntry, ...] = ()
    overlay: tuple[ET.Element, ...] = ()

    def fragments(self, category: str) -> tuple[PathFragment, ...]:
        return self.paths.get(category, ())


@dataclass
class Cell:
    position: Position
    paths: dict[str, tuple[PathFragment, ...]] = field(default_factory=dict)

    def fragments(self, category: str) -> tuple[PathFragment, ...]:
        return self.paths.get(category, ())
