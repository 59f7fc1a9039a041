"""ASCII and JSON rendering for category trees."""

import json
from typing import Any

from tree_builder.components import TreeNode, depth

from tree_renderer.components import layout

CATEGORY_NOT_FOUND = "Category not found."


def render(root: TreeNode | None) -> str:
    """Render the tree under *root* as box-drawing text.

    Returns :data:`CATEGORY_NOT_FOUND` when there is no tree.
    """
    if root is None:
        return CATEGORY_NOT_FOUND
    lines, _ = layout(root)
    # the first line is a stub for a parent the root does not have
    return "\n".join(lines[1:])


def render_json(root: TreeNode | None) -> str:
    """Render the tree under *root* as a JSON string."""
    if root is None:
        return json.dumps({"error": CATEGORY_NOT_FOUND}, indent=2)
    output = {
        "depth": depth(root),
        "size": root.size,
        "tree": _node_to_dict(root),
    }
    return json.dumps(output, indent=2)


def _node_to_dict(node: TreeNode) -> dict[str, Any]:
    return {
        "id": node.id,
        "label": node.label,
        "children": [_node_to_dict(child) for child in node.children],
    }
