"""Tests for tag variant selection."""

from dungeon.engine.fragments import TagEntry, TileRef
from dungeon.engine.tags import is_active, select, selected

ENTRY = TagEntry("lit", normal=TileRef("torch"), inverted=TileRef("dark"))


def test_active_tag_selects_normal():
    assert select(ENTRY, frozenset({"lit"})) == TileRef("torch")


def test_wildcard_selects_normal():
    assert select(ENTRY, "all") == TileRef("torch")


def test_inactive_tag_selects_inverted():
    assert select(ENTRY, frozenset()) == TileRef("dark")
    assert select(ENTRY, frozenset({"other"})) == TileRef("dark")


def test_missing_variant_selects_nothing():
    entry = TagEntry("lit", normal=TileRef("torch"))
    assert select(entry, frozenset()) is None
    entry = TagEntry("lit", inverted=TileRef("dark"))
    assert select(entry, "all") is None


def test_selected_preserves_order_and_skips_missing():
    entries = (
        TagEntry("a", normal=TileRef("a1"), inverted=TileRef("a0")),
        TagEntry("b", normal=TileRef("b1")),
        TagEntry("c", normal=TileRef("c1"), inverted=TileRef("c0")),
    )
    assert list(selected(entries, frozenset({"b"}))) == [TileRef("a0"), TileRef("b1"), TileRef("c0")]
    assert list(selected(entries, frozenset({"a"}))) == [TileRef("a1"), TileRef("c0")]


def test_is_active():
    assert is_active("x", "all")
    assert is_active("x", frozenset({"x"}))
    assert not is_active("x", frozenset({"y"}))
