"""Entry points: build a World from table rows and render it to SVG."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence

from dotenv import load_dotenv

from dungeon.config import settings
from dungeon.engine.compositor import Compositor
from dungeon.engine.config import RenderConfig
from dungeon.engine.fragments import Position
from dungeon.engine.world import World
from dungeon.svg.serializer import render_svg
from dungeon.tables.store import TableStore

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.dungeon_log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)

Tables = Mapping[str, Iterable[Sequence[str]]]


def create_world(tables: Tables, world: World | None = None) -> World:
    """Load table rows into a (new or existing) World."""
    _register_table_transforms()
    world = world or World()
    TableStore().load(tables, world)
    return world


def render_map(
    tables: Tables,
    config: RenderConfig | None = None,
    positions: Iterable[Position] | None = None,
) -> str:
    """Full pipeline: table rows → SVG document string."""
    config = config or RenderConfig.from_settings(settings)
    world = create_world(tables)
    result = Compositor(world, config).render(positions)
    return render_svg(result, config)


def _register_table_transforms() -> None:
    """Import all table modules so @table_transform decorators fire."""
    import importlib
    import pkgutil

    package = importlib.import_module("dungeon.tables")
    for _, module_name, _ in pkgutil.iter_modules(package.__path__):
        importlib.import_module(f"dungeon.tables.{module_name}")
