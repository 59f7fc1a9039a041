from tree_renderer.components import AsciiBlock, horizontal_bar, layout, merge_rows, vertical_bars
from tree_renderer.render import CATEGORY_NOT_FOUND, render, render_json

__all__ = [
    "CATEGORY_NOT_FOUND",
    "AsciiBlock",
    "horizontal_bar",
    "layout",
    "merge_rows",
    "render",
    "render_json",
    "vertical_bars",
]
