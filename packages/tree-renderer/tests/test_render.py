"""
pytest suite for the ASCII renderer.

The expected diagrams are golden strings; trailing spaces are part of
them, so they are spelled out line by line.
"""

import json

import pytest

from category_source import InMemorySource

from tree_builder.build_tree import build_tree
from tree_builder.components import TreeNode
from tree_renderer import CATEGORY_NOT_FOUND, layout, render, render_json
from tree_renderer.components import connector_row, horizontal_bar, merge_rows, vertical_bars


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def node(label: str, *children: TreeNode, id: int = 1) -> TreeNode:
    n = TreeNode(label=label, id=id)
    for child in children:
        n.add_child(child)
    return n


# ---------------------------------------------------------------------------
# Building blocks
# ---------------------------------------------------------------------------

class TestBars:
    def test_horizontal_bar(self):
        assert horizontal_bar("5") == "+---+"
        assert horizontal_bar("255") == "+-----+"

    def test_vertical_bars(self):
        assert vertical_bars("5") == "| 5 |"

    def test_bar_matches_content_width(self):
        assert len(horizontal_bar("Root")) == len(vertical_bars("Root"))


class TestCentering:
    """Odd padding goes left for an odd target width, right for an even one."""

    def test_odd_width(self):
        assert "ab".center(5) == "  ab "
        assert "+------+".center(11) == "  +------+ "

    def test_even_width(self):
        assert "a".center(4) == " a  "
        assert "|".center(8) == "   |    "

    def test_even_padding(self):
        assert "|".center(5) == "  |  "


class TestMergeRows:
    def test_side_by_side(self):
        assert merge_rows(["|", "2"], ["|", "13"], 1, 4) == [" |  |", " 2  13"]

    def test_left_longer(self):
        assert merge_rows(["a", "b", "c"], ["x"], 0, 2) == ["a x", "b", "c"]

    def test_right_longer(self):
        assert merge_rows(["a"], ["x", "y"], 0, 2) == ["a x", "  y"]

    def test_no_gap_when_left_overflows(self):
        assert merge_rows(["abcd"], ["x"], 0, 2) == ["abcdx"]

    def test_empty_right(self):
        assert merge_rows(["a", "b"], [], 0, 5) == ["a", "b"]


class TestConnectorRow:
    def test_two_children(self):
        assert connector_row("  |     |  ", 5) == "  +--+--+  "

    def test_adjacent_plus_signs_stay(self):
        assert connector_row("  |  ", 3) == "  ++ "

    def test_parent_column_past_the_end(self):
        assert connector_row("|", 3) == "+--+"


# ---------------------------------------------------------------------------
# layout
# ---------------------------------------------------------------------------

class TestLayoutLeaf:
    def setup_method(self):
        self.block = layout(node("5"))

    def test_lines(self):
        assert self.block.lines == ("  |  ", "+---+", "| 5 |", "+---+")

    def test_width(self):
        assert self.block.width == 5


class TestLayoutTwoLeaves:
    def setup_method(self):
        self.block = layout(node("Root", node("A"), node("B")))

    def test_width(self):
        assert self.block.width == 11

    def test_line_count(self):
        # 6 header lines + 4 merged leaf rows
        assert len(self.block.lines) == 10

    def test_all_lines_share_the_width(self):
        assert {len(line) for line in self.block.lines} == {11}


class TestLayoutSingleChild:
    def test_width_equals_child_width(self):
        block = layout(node("Root", node("A")))
        assert block.width == 5

    def test_right_side_is_empty(self):
        block = layout(node("Root", node("A")))
        assert block.lines[6:] == ("  |  ", "+---+", "| A |", "+---+")


# ---------------------------------------------------------------------------
# render
# ---------------------------------------------------------------------------

class TestRenderNotFound:
    def test_none(self):
        assert render(None) == CATEGORY_NOT_FOUND
        assert CATEGORY_NOT_FOUND == "Category not found."


class TestRenderGolden:
    def test_single_leaf(self):
        assert render(node("5")).split("\n") == ["+---+", "| 5 |", "+---+"]

    def test_root_with_two_leaves(self):
        expected = [
            "  +------+ ",
            "  | Root | ",
            "  +------+ ",
            "     |     ",
            "  +--+--+  ",
            "  |     |  ",
            "+---+ +---+",
            "| A | | B |",
            "+---+ +---+",
        ]
        assert render(node("Root", node("A"), node("B"))).split("\n") == expected

    def test_root_with_one_child(self):
        expected = [
            "+------+",
            "| Root |",
            "+------+",
            "   |    ",
            "  ++ ",
            "  |  ",
            "+---+",
            "| A |",
            "+---+",
        ]
        assert render(node("Root", node("A"))).split("\n") == expected

    def test_two_levels(self):
        tree = node("Root", node("A", node("C"), node("D")), node("B"))
        expected = [
            "     +------+    ",
            "     | Root |    ",
            "     +------+    ",
            "        |        ",
            "     +--+-----+  ",
            "     |        |  ",
            "   +---+    +---+",
            "   | A |    | B |",
            "   +---+    +---+",
            "     |     ",
            "  +--+--+  ",
            "  |     |  ",
            "+---+ +---+",
            "| C | | D |",
            "+---+ +---+",
        ]
        assert render(tree).split("\n") == expected

    def test_no_trailing_newline(self):
        assert not render(node("Root", node("A"), node("B"))).endswith("\n")


class TestRenderBuiltTree:
    def test_built_tree_matches_hand_built_tree(self):
        source = InMemorySource(
            {
                76: [{"id": 1, "name": "A"}, {"id": 2, "name": "B"}],
                1: [{"id": 3, "name": "C"}, {"id": 4, "name": "D"}],
            }
        )
        with source:
            root = build_tree(76, 2, source)
        tree = node("Root", node("A", node("C"), node("D")), node("B"))
        assert render(root) == render(tree)

    @pytest.mark.parametrize("max_level", [0, 1, 2, 3])
    def test_widest_line_is_the_block_width(self, max_level):
        source = InMemorySource(
            {
                76: [{"id": 1, "name": "Phones"}, {"id": 2, "name": "Tablets"}],
                1: [{"id": 3, "name": "Android"}, {"id": 4, "name": "iOS"}],
                3: [{"id": 5, "name": "Samsung"}],
            }
        )
        with source:
            root = build_tree(76, max_level, source)
        block = layout(root)
        assert max(len(line) for line in block.lines) >= block.width
        assert len(render(root).split("\n")) == len(block.lines) - 1


# ---------------------------------------------------------------------------
# render_json
# ---------------------------------------------------------------------------

class TestRenderJson:
    def test_not_found(self):
        assert json.loads(render_json(None)) == {"error": CATEGORY_NOT_FOUND}

    def test_tree(self):
        tree = node("Root", node("A", node("C", id=3), id=2), id=76)
        data = json.loads(render_json(tree))
        assert data["depth"] == 2
        assert data["size"] == 3
        assert data["tree"] == {
            "id": 76,
            "label": "Root",
            "children": [
                {
                    "id": 2,
                    "label": "A",
                    "children": [{"id": 3, "label": "C", "children": []}],
                }
            ],
        }
