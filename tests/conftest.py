"""Shared test fixtures."""

from __future__ import annotations

import pytest

import dungeon.tables.transforms  # noqa: F401  registers the tile/cell transforms
from dungeon.engine.config import RenderConfig
from dungeon.engine.fragments import Cell, LiteralOp, TagEntry, Tile, TileRef
from dungeon.engine.world import Kind, World
from dungeon.svg.markup import parse_markup


# Sample tables, as positional row values

CORRIDOR_TABLES = {
    "tile": [
        ["wall-n", "m 0 0 h 1"],
        ["wall-w", "m 0 0 v 1"],
        ["door", "m 0.25 0 h 0.5", "", "", "", "", '<text x="0.5" y="0.5" font-size="0.2">D</text>'],
        ["room", "wall-n wall-w", "", "", "", "lit:torch:dark"],
        ["torch", "m 0.5 0.5 l 0 0"],
        ["pool", "", "m 0.2 0.2 h 0.6"],
        ["", "", "v 0.6"],
    ],
    "cell": [
        ["0,0", "room door"],
        ["1,0", "wall-n (1, 0)", "pool"],
        ["2,0", "wall-w"],
    ],
}


def make_world(tiles: list[Tile] = (), cells: list[Cell] = ()) -> World:
    world = World()
    for tile in tiles:
        world.put(Kind.TILE, tile.id, tile)
    for cell in cells:
        world.put(Kind.CELL, cell.position, cell)
    return world


@pytest.fixture
def corridor_tables() -> dict[str, list[list[str]]]:
    return CORRIDOR_TABLES


@pytest.fixture
def simple_world() -> World:
    """One cell at the origin drawing a single tile."""
    return make_world(
        tiles=[Tile(id="corner", paths={"path": (LiteralOp("m", (1, 0)), LiteralOp("l", (0, 1)))})],
        cells=[Cell(position=(0, 0), paths={"path": (TileRef("corner"),)})],
    )


@pytest.fixture
def tagged_world() -> World:
    """A tile with a tag whose variants are other tiles."""
    return make_world(
        tiles=[
            Tile(
                id="door",
                paths={"path": (LiteralOp("h", (1,)),)},
                tags=(TagEntry("secret", normal=TileRef("hidden"), inverted=TileRef("open")),),
            ),
            Tile(id="hidden", paths={"path": (LiteralOp("v", (1,)),)}),
            Tile(id="open", paths={"path": (LiteralOp("l", (1, 1)),)}),
        ],
    )


@pytest.fixture
def label() -> Tile:
    return Tile(
        id="label",
        paths={"path": (LiteralOp("m", (0, 1)),)},
        overlay=(parse_markup('<text x="0.5" y="0.25" font-size="0.1">L</text>'),),
    )


@pytest.fixture
def config() -> RenderConfig:
    return RenderConfig(scale=100, nudge=(0, 0))
