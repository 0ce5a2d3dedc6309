"""Tag variant selection."""

from __future__ import annotations

from collections.abc import Iterator

from dungeon.engine.config import ActiveTags
from dungeon.engine.fragments import PathFragment, TagEntry


def is_active(tag: str, active: ActiveTags) -> bool:
    return active == "all" or tag in active


def select(entry: TagEntry, active: ActiveTags) -> PathFragment | None:
    """Pick the normal variant for an active tag, the inverted one otherwise.

    Either variant may be missing, in which case nothing is drawn.
    """
    if is_active(entry.tag, active):
        return entry.normal
    return entry.inverted


def selected(entries: tuple[TagEntry, ...], active: ActiveTags) -> Iterator[PathFragment]:
    """Yield the chosen fragment of each entry, in declared order."""
    for entry in entries:
        fragment = select(entry, active)
        if fragment is not None:
            yield fragment
