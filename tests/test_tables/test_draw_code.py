"""Tests for draw-code text parsing."""

import pytest

from dungeon.engine.fragments import CellRef, LiteralOp, RawMarkup, TagEntry, TileRef
from dungeon.svg.markup import MarkupError
from dungeon.tables.draw_code import parse_draw_code, parse_position, parse_tags


class TestDrawCode:
    def test_ops(self):
        assert parse_draw_code("m 1 0 l 0 1") == (LiteralOp("m", (1, 0)), LiteralOp("l", (0, 1)))

    def test_commas_and_floats(self):
        assert parse_draw_code("m 0.25,-0.5 h .5") == (LiteralOp("m", (0.25, -0.5)), LiteralOp("h", (0.5,)))

    def test_repeated_arguments_split_by_arity(self):
        assert parse_draw_code("l 1 0 0 1") == (LiteralOp("l", (1, 0)), LiteralOp("l", (0, 1)))
        assert parse_draw_code("h 1 2") == (LiteralOp("h", (1,)), LiteralOp("h", (2,)))

    def test_arc(self):
        assert parse_draw_code("a 0.5 0.5 0 0 1 1 1") == (LiteralOp("a", (0.5, 0.5, 0, 0, 1, 1, 1)),)

    def test_absolute_and_close(self):
        assert parse_draw_code("M 10 10 z") == (LiteralOp("M", (10, 10)), LiteralOp("z", ()))

    def test_unknown_opcode_kept(self):
        assert parse_draw_code("x 1 2") == (LiteralOp("x", (1, 2)),)

    def test_tile_refs(self):
        assert parse_draw_code("wall door-north m 1 0") == (
            TileRef("wall"),
            TileRef("door-north"),
            LiteralOp("m", (1, 0)),
        )

    def test_single_letter_without_numbers_is_a_tile(self):
        assert parse_draw_code("x y") == (TileRef("x"), TileRef("y"))

    def test_cell_refs(self):
        assert parse_draw_code("(1, 0) (-1 2) @(3,4)") == (
            CellRef(1, 0),
            CellRef(-1, 2),
            CellRef(3, 4, absolute=True),
        )

    def test_markup(self):
        fragments = parse_draw_code('h 1 <text x="0.5">A</text> <circle r="0.1"/> v 1')
        assert fragments[0] == LiteralOp("h", (1,))
        assert isinstance(fragments[1], RawMarkup)
        assert fragments[1].element.tag == "text"
        assert fragments[2].element.tag == "circle"
        assert fragments[3] == LiteralOp("v", (1,))

    def test_empty(self):
        assert parse_draw_code("") == ()
        assert parse_draw_code("   ") == ()

    def test_number_without_opcode(self):
        with pytest.raises(ValueError, match="without an instruction"):
            parse_draw_code("1 2")

    def test_unexpected_character(self):
        with pytest.raises(ValueError, match="Unexpected character"):
            parse_draw_code("m 1 0 ; l 0 1")

    def test_nested_markup_of_the_same_tag(self):
        fragments = parse_draw_code('<g><g><text x="0.5">A</text></g></g> h 1')
        assert len(fragments) == 2
        outer = fragments[0].element
        assert outer.tag == "g"
        assert outer[0].tag == "g"
        assert outer[0][0].text == "A"
        assert fragments[1] == LiteralOp("h", (1,))

    def test_markup_attribute_may_contain_angle_bracket(self):
        (fragment,) = parse_draw_code('<text data-note="a > b">A</text>')
        assert fragment.element.get("data-note") == "a > b"

    def test_compact_instructions(self):
        assert parse_draw_code("m1 0 l-1 1 h.5") == (
            LiteralOp("m", (1, 0)),
            LiteralOp("l", (-1, 1)),
            LiteralOp("h", (0.5,)),
        )

    def test_malformed_markup(self):
        with pytest.raises(MarkupError):
            parse_draw_code('<text x="1"><b>A</text>')


class TestTags:
    def test_full_entry(self):
        assert parse_tags("lit:torch:dark") == (TagEntry("lit", TileRef("torch"), TileRef("dark")),)

    def test_partial_entries(self):
        assert parse_tags("a:n b::i c") == (
            TagEntry("a", normal=TileRef("n")),
            TagEntry("b", inverted=TileRef("i")),
            TagEntry("c"),
        )

    def test_semicolon_separated(self):
        assert [e.tag for e in parse_tags("a:x; b:y")] == ["a", "b"]

    def test_empty(self):
        assert parse_tags("") == ()

    def test_missing_name(self):
        with pytest.raises(ValueError):
            parse_tags(":x")


class TestPosition:
    @pytest.mark.parametrize("text", ["3,4", "3, 4", "3 4", "(3, 4)", " (3 4) "])
    def test_formats(self, text):
        assert parse_position(text) == (3, 4)

    def test_negative(self):
        assert parse_position("-1,-2") == (-1, -2)

    @pytest.mark.parametrize("text", ["", "3", "a,b", "1,2,3"])
    def test_invalid(self, text):
        with pytest.raises(ValueError):
            parse_position(text)
