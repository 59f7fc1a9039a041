"""
TreeBuilder - builds a bounded category tree from a catalog source.

The tree is rooted at a synthetic ``"Root"`` node that holds the queried
category id. Below it every level holds at most two categories, and the
tree is at most ``max_level`` levels deep:

    Root (76)
    ├── Phones (40)
    │   ├── Android (12)
    │   └── iOS (13)
    └── Tablets (41)

Catalog lookups are memoised per level, so a build costs one lookup per
populated level instead of one per node.

Usage (library):
    from category_source import CategorySource
    from tree_builder.build_tree import build_tree

    with CategorySource(token="...") as source:
        root = build_tree(76, 2, source)
"""

import logging

from category_source import BaseSource, CategorySource, CategorySourceError

from tree_builder.components import LevelCache, TreeNode
from tree_filler.fill_tree import fill_tree

logger = logging.getLogger(__name__)

ROOT_LABEL = "Root"


class InvalidArgumentError(ValueError):
    """Raised for a non-positive category id or a negative depth level."""


def build_tree(
    root_id: int, max_level: int, source: CategorySource | BaseSource
) -> TreeNode | None:
    """Build the category tree under *root_id*, at most *max_level* deep.

    Returns:
        The ``"Root"`` node, or ``None`` when *root_id* does not exist.

    Raises:
        InvalidArgumentError: ``max_level < 0`` or ``root_id <= 0``. No
            lookup is made.
        CategorySourceError: a catalog lookup failed for a reason other
            than not-found.
    """
    if max_level < 0:
        raise InvalidArgumentError("Negative depth level.")
    if root_id <= 0:
        raise InvalidArgumentError("Invalid category id.")

    result = source.fetch_children(root_id)
    if result.is_not_found:
        logger.info("Root category %d not found", root_id)
        return None
    if not result.is_found:
        raise CategorySourceError(root_id, result.detail)

    root = TreeNode(label=ROOT_LABEL, id=root_id)
    cache = LevelCache()
    # the root lookup doubles as the level 0 lookup
    cache.store(0, result)
    fill_tree(0, root_id, root, max_level, cache, source)

    logger.debug("Built tree for %d with %d nodes", root_id, root.size)
    return root
