"""End-to-end tests: table rows → SVG."""

from __future__ import annotations

import xml.etree.ElementTree as ET

from dungeon.config import Settings
from dungeon.engine.compositor import Compositor
from dungeon.engine.config import RenderConfig
from dungeon.main import create_world, render_map

NS = "{http://www.w3.org/2000/svg}"


def _paths(svg: str) -> dict[str, str]:
    root = ET.fromstring(svg)
    return {p.get("id"): p.get("d") for p in root.iter(f"{NS}path")}


def test_one_cell_one_tile():
    tables = {"tile": [["corner", "m 1 0 l 0 1"]], "cell": [["0,0", "corner"]]}
    svg = render_map(tables, RenderConfig(scale=100, nudge=(0, 0)))
    assert _paths(svg)["path"] == "M 0 0 m 100 0 l 0 100"


def test_corridor_level(corridor_tables):
    config = RenderConfig(scale=100)
    world = create_world(corridor_tables)
    result = Compositor(world, config).render()

    assert result.main.d == (
        "M 0 0 m 0 0 h 100 m 0 0 v 100 m 50 50 l 0 0 m 25 0 h 50"
        " M 100 0 m 0 0 h 100 m 0 0 v 100"
        " M 200 0 m 0 0 v 100"
    )
    assert result.layers["water"].d == "M 0 0 M 100 0 m 20 20 h 60 v 60 M 200 0"
    assert result.touched[(0, 0)] == ["room", "wall-n", "wall-w", "torch", "door"]

    assert len(result.overlays) == 1
    door_label = result.overlays[0]
    assert (door_label.get("x"), door_label.get("y"), door_label.get("font-size")) == ("50", "50", "20")


def test_inactive_tag_drops_variant(corridor_tables):
    svg = render_map(corridor_tables, RenderConfig(scale=100, active_tags=set()), positions=[(0, 0)])
    assert _paths(svg)["path"] == "M 0 0 m 0 0 h 100 m 0 0 v 100 m 25 0 h 50"


def test_config_from_settings():
    config = RenderConfig.from_settings(Settings(dungeon_scale=50, dungeon_nudge=(4, 4)), grid=True)
    assert config.scale_x == 50
    assert config.nudge == (4, 4)
    assert config.grid
    assert config.max_depth == 64
