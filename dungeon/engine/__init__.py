"""Dungeon map tile/cell resolution and path composition engine."""

from dungeon.engine.compositor import Compositor, render_level
from dungeon.engine.config import RenderConfig
from dungeon.engine.context import RenderResult, TouchedTiles
from dungeon.engine.fragments import Cell, CellRef, LiteralOp, RawMarkup, TagEntry, Tile, TileRef
from dungeon.engine.resolver import CyclicReferenceError, ResolutionDepthError, ResolutionError, Resolver
from dungeon.engine.scale import scale
from dungeon.engine.world import Kind, World

__all__ = [
    "Compositor",
    "render_level",
    "RenderConfig",
    "RenderResult",
    "TouchedTiles",
    "Cell",
    "CellRef",
    "LiteralOp",
    "RawMarkup",
    "TagEntry",
    "Tile",
    "TileRef",
    "CyclicReferenceError",
    "ResolutionDepthError",
    "ResolutionError",
    "Resolver",
    "scale",
    "Kind",
    "World",
]
