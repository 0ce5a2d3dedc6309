"""Reference resolver: expands tile ids and cell positions into literal fragments.

Expansion is depth-first and pre-order. Every literal fragment returned is
a deep copy, so callers may mutate the result without touching the World.
"""

from __future__ import annotations

import copy
import logging

from dungeon.engine.config import RenderConfig
from dungeon.engine.context import TouchedTiles
from dungeon.engine.fragments import (
    CellRef,
    LiteralOp,
    PathFragment,
    Position,
    RawMarkup,
    ResolvedFragment,
    TileRef,
)
from dungeon.engine.tags import selected
from dungeon.engine.world import Kind, World

logger = logging.getLogger(__name__)


class ResolutionError(ValueError):
    """Base class for reference resolution failures."""


class CyclicReferenceError(ResolutionError):
    def __init__(self, chain: list[str]) -> None:
        self.chain = chain
        super().__init__(f"Cyclic reference: {' -> '.join(chain)}")


class ResolutionDepthError(ResolutionError):
    def __init__(self, chain: list[str], max_depth: int) -> None:
        self.chain = chain
        super().__init__(f"Reference depth exceeds {max_depth}: {' -> '.join(chain)}")


class Resolver:
    """Resolves references against a World."""

    def __init__(self, world: World, config: RenderConfig | None = None) -> None:
        self.world = world
        self.config = config or RenderConfig()
        self.touched = TouchedTiles()
        self._chain: list[str] = []

    def resolve_tile(
        self,
        tile_id: str,
        category: str,
        *,
        inhibit_tags: bool = False,
        inhibit_collection: bool = False,
    ) -> list[ResolvedFragment]:
        self._begin(inhibit_collection)
        return self._tile(tile_id, category, inhibit_tags, inhibit_collection)

    def resolve_cell(
        self,
        position: Position,
        category: str,
        *,
        no_follow: bool = False,
        inhibit_tags: bool = False,
        inhibit_collection: bool = False,
    ) -> list[ResolvedFragment]:
        self._begin(inhibit_collection)
        return self._cell(tuple(position), category, no_follow, inhibit_tags, inhibit_collection)

    # -- internals --

    def _begin(self, inhibit_collection: bool) -> None:
        self._chain = []
        if not inhibit_collection:
            self.touched.clear()

    def _enter(self, label: str) -> None:
        if label in self._chain:
            start = self._chain.index(label)
            raise CyclicReferenceError(self._chain[start:] + [label])
        if len(self._chain) >= self.config.max_depth:
            raise ResolutionDepthError(self._chain + [label], self.config.max_depth)
        self._chain.append(label)

    def _tile(
        self,
        tile_id: str,
        category: str,
        inhibit_tags: bool,
        inhibit_collection: bool,
    ) -> list[ResolvedFragment]:
        if not self.world.has(Kind.TILE, tile_id):
            logger.debug("Dangling tile reference %r", tile_id)
            return []

        tile = self.world.tile(tile_id)
        self._enter(f"tile:{tile_id}")
        try:
            if not inhibit_collection:
                self.touched.add(tile_id)

            out = self._expand(tile.fragments(category), category, None, True, inhibit_tags, inhibit_collection)

            if not inhibit_tags:
                for fragment in selected(tile.tags, self.config.active_tags):
                    if isinstance(fragment, (LiteralOp, RawMarkup)) and category != self.config.primary:
                        continue
                    out.extend(
                        self._expand((fragment,), category, None, True, inhibit_tags, inhibit_collection)
                    )
            return out
        finally:
            self._chain.pop()

    def _cell(
        self,
        position: Position,
        category: str,
        no_follow: bool,
        inhibit_tags: bool,
        inhibit_collection: bool,
    ) -> list[ResolvedFragment]:
        if not self.world.has(Kind.CELL, position):
            logger.debug("Dangling cell reference %r", position)
            return []

        cell = self.world.cell(position)
        self._enter(f"cell:{position[0]},{position[1]}")
        try:
            return self._expand(
                cell.fragments(category), category, position, no_follow, inhibit_tags, inhibit_collection
            )
        finally:
            self._chain.pop()

    def _expand(
        self,
        fragments: tuple[PathFragment, ...],
        category: str,
        origin: Position | None,
        no_follow: bool,
        inhibit_tags: bool,
        inhibit_collection: bool,
    ) -> list[ResolvedFragment]:
        out: list[ResolvedFragment] = []
        for fragment in fragments:
            if isinstance(fragment, (LiteralOp, RawMarkup)):
                out.append(copy.deepcopy(fragment))
            elif isinstance(fragment, TileRef):
                out.extend(self._tile(fragment.tile_id, category, inhibit_tags, inhibit_collection))
            elif isinstance(fragment, CellRef):
                # Followed cells never follow further
                if origin is None or no_follow:
                    continue
                out.extend(
                    self._cell(fragment.target(origin), category, True, inhibit_tags, inhibit_collection)
                )
            else:
                raise TypeError(f"Unknown path fragment: {fragment!r}")
        return out
