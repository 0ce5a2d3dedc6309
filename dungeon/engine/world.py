"""World: owns the tile and cell tables.

Lookups never fail: an unknown key returns an empty record so callers
don't branch on absence. Reloads build a complete replacement table and
swap it in with one assignment.
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Iterable
from typing import Any, Hashable

from dungeon.engine.fragments import Cell, Tile

logger = logging.getLogger(__name__)


class Kind(str, enum.Enum):
    TILE = "tile"
    CELL = "cell"


class World:
    """Tile and cell tables for one map."""

    def __init__(self) -> None:
        self._tables: dict[Kind, dict[Hashable, Any]] = {Kind.TILE: {}, Kind.CELL: {}}

    def put(self, kind: Kind, key: Hashable, record: Any) -> None:
        self._tables[Kind(kind)][key] = record

    def get(self, kind: Kind, key: Hashable) -> Any:
        kind = Kind(kind)
        record = self._tables[kind].get(key)
        if record is None:
            return self._default(kind, key)
        return record

    def has(self, kind: Kind, key: Hashable) -> bool:
        return key in self._tables[Kind(kind)]

    def ids(self, kind: Kind) -> list[Hashable]:
        return list(self._tables[Kind(kind)])

    def clear(self, kind: Kind) -> None:
        self._tables[Kind(kind)] = {}

    def reload(self, kind: Kind, records: Iterable[tuple[Hashable, Any]]) -> int:
        """Replace a table. The old table stays visible until the new one is complete."""
        kind = Kind(kind)
        table: dict[Hashable, Any] = {}
        for key, record in records:
            table[key] = record
        self._tables[kind] = table
        logger.info("Reloaded %s table: %d records", kind.value, len(table))
        return len(table)

    # Convenience accessors

    def tile(self, tile_id: str) -> Tile:
        return self.get(Kind.TILE, tile_id)

    def cell(self, position: tuple[int, int]) -> Cell:
        return self.get(Kind.CELL, tuple(position))

    @staticmethod
    def _default(kind: Kind, key: Hashable) -> Any:
        if kind is Kind.TILE:
            return Tile(id=str(key))
        return Cell(position=key)
