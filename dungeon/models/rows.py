"""Table row models: one validated row per table type."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class _Row(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")

    path: str = Field(default="", description="Primary draw code")
    water: str = Field(default="", description="Water layer draw code")
    stairs: str = Field(default="", description="Stairs layer draw code")
    decorations: str = Field(default="", description="Decorations layer draw code")

    def draw_code(self) -> dict[str, str]:
        """Category name -> non-empty draw code text."""
        codes = {
            "path": self.path,
            "water": self.water,
            "stairs": self.stairs,
            "decorations": self.decorations,
        }
        return {category: text for category, text in codes.items() if text}


class TileRow(_Row):
    tile: str = Field(default="", description="Tile id; blank continues the previous tile")
    tags: str = Field(default="", description="tag:normal:inverted entries")
    overlay: str = Field(default="", description="Markup drawn once per cell using the tile")


class CellRow(_Row):
    cell: str = Field(default="", description="Cell position; blank continues the previous cell")
