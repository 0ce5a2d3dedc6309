"""TableStore: feeds table rows through registered transforms into a World."""

from __future__ import annotations

import logging
import time
from collections.abc import Iterable, Mapping, Sequence
from typing import Any, Hashable

from dungeon.engine.world import Kind, World
from dungeon.tables.registry import TableTransformRegistry, TransformContext, get_registry

logger = logging.getLogger(__name__)


class TableStore:
    """Runs rows grouped by table type through their transforms."""

    def __init__(self, registry: TableTransformRegistry | None = None) -> None:
        self.registry = registry or get_registry()

    def collect(self, table: str, rows: Iterable[Sequence[str]]) -> dict[Hashable, Any]:
        """Build the records for one table without touching any World."""
        spec = self.registry.get(table)
        ctx = TransformContext(table=table)
        records: dict[Hashable, Any] = {}

        for index, values in enumerate(rows):
            ctx.index = index
            ctx.row = spec.bind([str(v) for v in values])
            out = spec.fn(ctx)
            if out is None:
                continue
            key, record = out
            if key in records:
                logger.warning("Table %s: duplicate key %r replaces earlier row", table, key)
            records[key] = record
            ctx.last_key = key
            ctx.record = record

        return records

    def load(self, tables: Mapping[str, Iterable[Sequence[str]]], world: World) -> dict[Kind, int]:
        """Transform every known table and reload the matching World tables.

        Tables mapping to the same kind are merged in the order given. A
        failing row aborts the load before any World table is replaced.
        """
        start = time.perf_counter()
        by_kind: dict[Kind, dict[Hashable, Any]] = {}

        for table, rows in tables.items():
            spec = self.registry.find(table)
            if spec is None:
                logger.warning("No transform registered for table %r, skipping", table)
                continue
            by_kind.setdefault(spec.kind, {}).update(self.collect(table, rows))

        counts = {kind: world.reload(kind, records.items()) for kind, records in by_kind.items()}

        elapsed = (time.perf_counter() - start) * 1000
        logger.info(
            "Loaded %s in %.0fms",
            ", ".join(f"{n} {kind.value}s" for kind, n in counts.items()) or "nothing",
            elapsed,
        )
        return counts
