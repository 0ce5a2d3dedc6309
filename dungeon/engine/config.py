"""Render configuration: one value carrying every per-render option."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Literal, Union

if TYPE_CHECKING:
    from dungeon.config import Settings

PRIMARY_CATEGORY = "path"
SECONDARY_CATEGORIES = ("water", "stairs", "decorations")

ActiveTags = Union[Literal["all"], frozenset[str]]


def _default_path_attributes() -> dict[str, dict[str, str]]:
    return {
        "path": {"fill": "none", "stroke": "black", "stroke-width": "3"},
        "water": {"fill": "none", "stroke": "blue", "stroke-width": "2"},
        "stairs": {"fill": "none", "stroke": "black", "stroke-width": "1"},
        "decorations": {"fill": "none", "stroke": "black", "stroke-width": "1"},
        "grid": {"fill": "none", "stroke": "#cccccc", "stroke-width": "1"},
    }


@dataclass
class RenderConfig:
    """Controls scaling, placement and styling of a render."""

    # Pixels per dungeon unit: a scalar or an (x, y) pair
    scale: float | tuple[float, float] = 100.0
    # Pixel offset applied to all content
    nudge: tuple[int, int] = (0, 0)
    # Per-category SVG style attributes
    path_attributes: dict[str, dict[str, str]] = field(default_factory=_default_path_attributes)
    # "all" or a set of active tag names
    active_tags: ActiveTags = "all"

    primary: str = PRIMARY_CATEGORY
    secondary: tuple[str, ...] = SECONDARY_CATEGORIES

    # Maximum reference nesting before resolution is aborted
    max_depth: int = 64

    # (width, height) in pixels; None sizes the canvas to the drawing
    canvas_size: tuple[int, int] | None = None
    # Draw a background grid line at every cell boundary
    grid: bool = False

    def __post_init__(self) -> None:
        if self.active_tags != "all":
            self.active_tags = frozenset(self.active_tags)

    @property
    def scale_x(self) -> float:
        return self.scale[0] if isinstance(self.scale, tuple) else self.scale

    @property
    def scale_y(self) -> float:
        return self.scale[1] if isinstance(self.scale, tuple) else self.scale

    def attributes_for(self, category: str) -> dict[str, str]:
        return dict(self.path_attributes.get(category, {}))

    @classmethod
    def from_settings(cls, settings: "Settings", **overrides) -> "RenderConfig":
        """Build a config seeded from environment settings."""
        values = {
            "scale": settings.dungeon_scale,
            "nudge": tuple(settings.dungeon_nudge),
            "max_depth": settings.dungeon_max_depth,
        }
        values.update(overrides)
        return cls(**values)
