"""Compositor: resolves, scales and serializes a set of cells into render layers."""

from __future__ import annotations

import logging
import math
import time
from collections.abc import Iterable

from dungeon.engine.config import RenderConfig
from dungeon.engine.context import Layer, RenderResult
from dungeon.engine.fragments import LiteralOp, Position, RawMarkup, ResolvedFragment
from dungeon.engine.resolver import Resolver
from dungeon.engine.scale import nudge, place_markup, scale
from dungeon.engine.world import Kind, World
from dungeon.svg import serializer
from dungeon.utils.geometry import grid_extent, path_bbox, union_bbox
from dungeon.utils.math_helpers import round_half_away

logger = logging.getLogger(__name__)


class Compositor:
    """Builds the main path, secondary layers and overlays for a level."""

    def __init__(self, world: World, config: RenderConfig | None = None) -> None:
        self.world = world
        self.config = config or RenderConfig()
        self.resolver = Resolver(world, self.config)

    def render(self, positions: Iterable[Position] | None = None) -> RenderResult:
        """Compose the given cells, or every registered cell when None."""
        start = time.perf_counter()
        cfg = self.config

        if positions is None:
            cells = [tuple(p) for p in self.world.ids(Kind.CELL)]
        else:
            cells = [tuple(p) for p in positions]

        result = RenderResult(positions=cells, main=Layer(category=cfg.primary))
        result.layers = {category: Layer(category=category) for category in cfg.secondary}

        for position in cells:
            origin = self.cell_origin(position)
            move = self._move_to(origin)

            # Primary: follows cell refs and collects touched tiles
            fragments = self.resolver.resolve_cell(position, cfg.primary)
            touched = list(self.resolver.touched)
            result.touched[position] = touched
            result.main.fragments.append(move)
            result.main.fragments.extend(self._scale_cell(fragments, origin))

            for tile_id in touched:
                for element in self.world.tile(tile_id).overlay:
                    result.overlays.append(
                        place_markup(element, cfg.scale_x, cfg.scale_y, origin, cfg.nudge)
                    )

            for category, layer in result.layers.items():
                fragments = self.resolver.resolve_cell(
                    position, category, no_follow=True, inhibit_collection=True
                )
                layer.fragments.append(move)
                layer.fragments.extend(self._scale_cell(fragments, origin))

        for layer in [result.main, *result.layers.values()]:
            layer.d, layer.markup = serializer.serialize(layer.fragments)

        if cfg.grid:
            result.grid = self.grid_path(cells)

        result.width, result.height = self.canvas_size(result)

        elapsed = (time.perf_counter() - start) * 1000
        logger.info(
            "Rendered %d cells, %d overlays, canvas %d×%d in %.0fms",
            len(cells),
            len(result.overlays),
            result.width,
            result.height,
            elapsed,
        )
        return result

    def cell_origin(self, position: Position) -> tuple[int, int]:
        """Pixel position of a cell's top-left corner, before the nudge."""
        cfg = self.config
        return (round_half_away(position[0] * cfg.scale_x), round_half_away(position[1] * cfg.scale_y))

    def grid_path(self, positions: list[Position]) -> str:
        """Path data for one line along every cell boundary."""
        cfg = self.config
        cols, rows = grid_extent(positions)
        nx, ny = cfg.nudge
        width = round_half_away(cols * cfg.scale_x)
        height = round_half_away(rows * cfg.scale_y)

        ops: list[ResolvedFragment] = []
        for col in range(cols + 1):
            ops.append(LiteralOp("M", (round_half_away(col * cfg.scale_x) + nx, ny)))
            ops.append(LiteralOp("v", (height,)))
        for row in range(rows + 1):
            ops.append(LiteralOp("M", (nx, round_half_away(row * cfg.scale_y) + ny)))
            ops.append(LiteralOp("h", (width,)))
        d, _ = serializer.serialize(ops)
        return d

    def canvas_size(self, result: RenderResult) -> tuple[int, int]:
        """Configured size, or the drawing's extent padded by the nudge on both sides."""
        cfg = self.config
        if cfg.canvas_size is not None:
            return cfg.canvas_size

        nx, ny = cfg.nudge
        cols, rows = grid_extent(result.positions)
        right = nx + cols * cfg.scale_x
        bottom = ny + rows * cfg.scale_y

        bounds = union_bbox(path_bbox(layer.d) for layer in [result.main, *result.layers.values()])
        if bounds is not None:
            right = max(right, bounds[2])
            bottom = max(bottom, bounds[3])

        return (math.ceil(right + nx), math.ceil(bottom + ny))

    def _move_to(self, origin: tuple[int, int]) -> LiteralOp:
        nx, ny = self.config.nudge
        return LiteralOp("M", (origin[0] + nx, origin[1] + ny))

    def _scale_cell(self, fragments: list[ResolvedFragment], origin: tuple[int, int]) -> list[ResolvedFragment]:
        cfg = self.config
        scaled = scale(fragments, cfg.scale_x, cfg.scale_y, origin)
        for fragment in scaled:
            if isinstance(fragment, RawMarkup):
                nudge(fragment.element, *cfg.nudge)
        return scaled


def render_level(
    world: World,
    config: RenderConfig | None = None,
    positions: Iterable[Position] | None = None,
) -> RenderResult:
    """Factory-style shortcut for a one-off render."""
    return Compositor(world, config).render(positions)
