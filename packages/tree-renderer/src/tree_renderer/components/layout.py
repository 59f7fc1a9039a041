"""Box-drawing layout for binary category trees.

Each subtree is laid out as an :class:`AsciiBlock`: its text rows, top to
bottom, and the width the parent uses to place a sibling next to it.
A leaf is a box with a connector stub on top::

      |
    +---+
    | 5 |
    +---+

An internal node puts its own box above the merged rows of its children
and joins them with a connector row such as ``+--+--+``.
"""

import re
from typing import NamedTuple

from tree_builder.components import TreeNode

_BRANCH_SPAN = re.compile(r"\+(.+)\+")


class AsciiBlock(NamedTuple):
    lines: tuple[str, ...]
    width: int


def horizontal_bar(text: str) -> str:
    """Border sized to fit ``vertical_bars(text)``.

        horizontal_bar("1")    # "+---+"
        horizontal_bar("255")  # "+-----+"
    """
    return "+" + "-" * (len(text) + 2) + "+"


def vertical_bars(text: str) -> str:
    """vertical_bars("2") == "| 2 |" """
    return f"| {text} |"


def merge_rows(
    rows1: tuple[str, ...] | list[str],
    rows2: tuple[str, ...] | list[str],
    p1: int,
    p2: int,
) -> list[str]:
    """Place two row lists side by side.

    Rows of *rows1* start at column *p1*, rows of *rows2* at column *p2*
    (or right after the *rows1* row when that is already longer). The
    result is as long as the longer input.

        merge_rows(["|", "2"], ["|", "13"], 1, 4)  # [" |  |", " 2  13"]
    """
    merged = []
    for i in range(max(len(rows1), len(rows2))):
        row = " " * p1
        if i < len(rows1):
            row += rows1[i]
        if i < len(rows2):
            row += " " * max(0, p2 - len(row)) + rows2[i]
        merged.append(row)
    return merged


def _put_char(row: str, index: int, char: str) -> str:
    row = row.ljust(index)
    return row[:index] + char + row[index + 1:]


def connector_row(top_row: str, parent_column: int) -> str:
    """Horizontal branch line joining a parent to its children.

    Every child stub in *top_row* becomes a ``+``, so does the parent's
    stub at *parent_column*, and the gaps between the outermost ``+``
    become dashes.
    """
    row = _put_char(top_row.replace("|", "+"), parent_column, "+")
    return _BRANCH_SPAN.sub(lambda m: m.group(0).replace(" ", "-"), row, count=1)


def layout(node: TreeNode) -> AsciiBlock:
    """Lay out the subtree rooted at *node*.

    The first line is always the node's own connector stub, which the
    caller drops for the tree root.
    """
    content = vertical_bars(node.label)

    if node.first_child is None:
        bar = horizontal_bar(node.label)
        return AsciiBlock(("|".center(len(content)), bar, content, bar), len(content))

    left, width_left = layout(node.first_child)
    if node.last_child is not None:
        right, width_right = layout(node.last_child)
    else:
        right, width_right = (), -1

    width = width_left + width_right + 1
    rows = merge_rows(left, right, 0, width_left + 1)

    bar = horizontal_bar(node.label).center(width)
    stub = "|".center(len(bar))
    branch = connector_row(rows[0], stub.index("|"))

    lines = (stub, bar, content.center(width), bar, stub, branch, *rows)
    return AsciiBlock(lines, width)
