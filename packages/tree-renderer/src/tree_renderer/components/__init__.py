from .layout import AsciiBlock, connector_row, horizontal_bar, layout, merge_rows, vertical_bars

__all__ = [
    "AsciiBlock",
    "connector_row",
    "horizontal_bar",
    "layout",
    "merge_rows",
    "vertical_bars",
]
