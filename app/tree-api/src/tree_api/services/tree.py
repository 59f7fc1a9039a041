import logging

from category_source import CategorySource
from tree_builder.build_tree import build_tree
from tree_renderer import render, render_json

logger = logging.getLogger(__name__)


def render_tree(category_id: int, depth: int, output_format: str, source: CategorySource) -> dict:
    root = build_tree(category_id, depth, source)
    rendered = render_json(root) if output_format == "json" else render(root)
    logger.info("Rendered tree for %d at depth %d (found=%s)", category_id, depth, root is not None)
    return {
        "category_id": category_id,
        "depth": depth,
        "found": root is not None,
        "rendered": rendered,
    }
