"""Table transform registry: every table type is handled by a function registered via decorator.

Usage:
    @table_transform("tile", kind=Kind.TILE, columns=("tile", "path"))
    def tile_row(ctx: TransformContext) -> tuple[str, Tile] | None:
        return ctx.row["tile"], Tile(id=ctx.row["tile"], ...)

A transform returns ``(key, record)`` to start a new record, or None after
extending ``ctx.record`` with a continuation row.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Hashable, Optional

from dungeon.engine.world import Kind

logger = logging.getLogger(__name__)


@dataclass
class TransformContext:
    """Per-row state handed to a table transform."""

    table: str
    # Column name -> raw cell text for the current row
    row: dict[str, str] = field(default_factory=dict)
    # Key of the most recently started record
    last_key: Hashable | None = None
    # Record being built; continuation rows extend it
    record: Any = None
    index: int = 0


RowTransform = Callable[[TransformContext], Optional[tuple[Hashable, Any]]]


@dataclass
class TableTransformSpec:
    table: str
    kind: Kind
    fn: RowTransform
    columns: tuple[str, ...] = ()
    description: str = ""

    def bind(self, values: list[str]) -> dict[str, str]:
        """Bind positional row values to column names; missing columns read as ""."""
        if len(values) > len(self.columns):
            logger.debug("Table %s: ignoring %d extra values", self.table, len(values) - len(self.columns))
        return {name: (values[i] if i < len(values) else "") for i, name in enumerate(self.columns)}


class TableTransformRegistry:
    """Registry of row transforms keyed by table type."""

    def __init__(self) -> None:
        self._transforms: dict[str, TableTransformSpec] = {}

    def register(self, spec: TableTransformSpec) -> None:
        if spec.table in self._transforms:
            raise ValueError(f"Duplicate table transform: {spec.table}")
        self._transforms[spec.table] = spec
        logger.debug("Registered table transform %s (%s)", spec.table, spec.kind.value)

    def get(self, table: str) -> TableTransformSpec:
        return self._transforms[table]

    def find(self, table: str) -> TableTransformSpec | None:
        return self._transforms.get(table)

    def all(self) -> list[TableTransformSpec]:
        return list(self._transforms.values())

    @property
    def count(self) -> int:
        return len(self._transforms)


# Module-level singleton
_registry = TableTransformRegistry()


def get_registry() -> TableTransformRegistry:
    return _registry


def table_transform(
    table: str,
    *,
    kind: Kind,
    columns: tuple[str, ...],
    description: str = "",
):
    """Decorator to register a row transform for a table type."""

    def decorator(fn: RowTransform):
        _registry.register(
            TableTransformSpec(table=table, kind=kind, fn=fn, columns=tuple(columns), description=description)
        )
        return fn

    return decorator
