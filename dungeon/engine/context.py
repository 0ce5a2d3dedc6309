"""Render state shared between the resolver, compositor and serializer."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from collections.abc import Iterator
from dataclasses import dataclass, field

from dungeon.engine.fragments import Position, ResolvedFragment


class TouchedTiles:
    """Ordered set of tile ids visited while resolving one cell."""

    def __init__(self) -> None:
        self._ids: dict[str, None] = {}

    def add(self, tile_id: str) -> bool:
        """Record a visit. Returns True on the first visit only."""
        if tile_id in self._ids:
            return False
        self._ids[tile_id] = None
        return True

    def clear(self) -> None:
        self._ids.clear()

    def __contains__(self, tile_id: object) -> bool:
        return tile_id in self._ids

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._ids))

    def __len__(self) -> int:
        return len(self._ids)


@dataclass
class Layer:
    """One scaled path: the fragments plus their serialized form."""

    category: str
    fragments: list[ResolvedFragment] = field(default_factory=list)
    d: str = ""
    markup: list[ET.Element] = field(default_factory=list)


@dataclass
class RenderResult:
    """Everything the canvas needs to draw a level."""

    # Cells in render order
    positions: list[Position] = field(default_factory=list)
    main: Layer = field(default_factory=lambda: Layer(category="path"))
    # Secondary category name -> layer, in configured order
    layers: dict[str, Layer] = field(default_factory=dict)
    # Positioned overlay elements, in cell order
    overlays: list[ET.Element] = field(default_factory=list)
    # Background grid path data, empty when disabled
    grid: str = ""
    width: int = 0
    height: int = 0
    # Tiles touched per cell
    touched: dict[Position, list[str]] = field(default_factory=dict)
