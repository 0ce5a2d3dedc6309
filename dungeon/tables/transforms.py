"""Built-in row transforms for the ``tile`` and ``cell`` tables.

A row with a blank key continues the record started by the row above it:
its draw code is appended to the same categories.
"""

from __future__ import annotations

from dungeon.engine.fragments import Cell, PathFragment, Position, Tile
from dungeon.engine.world import Kind
from dungeon.models.rows import CellRow, TileRow
from dungeon.svg.markup import parse_markup_list
from dungeon.tables.draw_code import parse_draw_code, parse_position, parse_tags
from dungeon.tables.registry import TransformContext, table_transform

CATEGORY_COLUMNS = ("path", "water", "stairs", "decorations")


def _parse_paths(row: TileRow | CellRow) -> dict[str, tuple[PathFragment, ...]]:
    return {category: parse_draw_code(text) for category, text in row.draw_code().items()}


def _extend_paths(record: Tile | Cell, paths: dict[str, tuple[PathFragment, ...]]) -> None:
    for category, fragments in paths.items():
        record.paths[category] = record.fragments(category) + fragments


def _continued(ctx: TransformContext, expected: type) -> Tile | Cell:
    if not isinstance(ctx.record, expected):
        raise ValueError(f"Table {ctx.table}: row {ctx.index} continues a record but none was started")
    return ctx.record


@table_transform(
    "tile",
    kind=Kind.TILE,
    columns=("tile", *CATEGORY_COLUMNS, "tags", "overlay"),
    description="Reusable drawing fragments with tag variants and overlay markup",
)
def tile_row(ctx: TransformContext) -> tuple[str, Tile] | None:
    row = TileRow(**ctx.row)
    paths = _parse_paths(row)
    tags = parse_tags(row.tags)
    overlay = tuple(parse_markup_list(row.overlay))

    if not row.tile:
        tile = _continued(ctx, Tile)
        _extend_paths(tile, paths)
        tile.tags += tags
        tile.overlay += overlay
        return None

    return row.tile, Tile(id=row.tile, paths=paths, tags=tags, overlay=overlay)


@table_transform(
    "cell",
    kind=Kind.CELL,
    columns=("cell", *CATEGORY_COLUMNS),
    description="Per-position draw code referencing tiles and neighbouring cells",
)
def cell_row(ctx: TransformContext) -> tuple[Position, Cell] | None:
    row = CellRow(**ctx.row)
    paths = _parse_paths(row)

    if not row.cell:
        _extend_paths(_continued(ctx, Cell), paths)
        return None

    position = parse_position(row.cell)
    return position, Cell(position=position, paths=paths)
