"""
TreeFiller - recursively populates a tree node from a category source.

Width is capped per level, not per parent: the child loop stops as soon
as the level being expanded already holds two nodes. Together with
``take 2`` on each lookup this keeps every level at two nodes or fewer.

Lookups go through the shared :class:`~tree_builder.components.LevelCache`.
The first node expanded at a level fetches its own children; every later
node at the same level reuses that result rather than fetching again,
even when it sits under a different parent.
"""

import logging

from category_source import BaseSource, CategorySource, CategorySourceError

from tree_builder.components import LevelCache, TreeNode

logger = logging.getLogger(__name__)

MAX_CHILDREN = 2


def fill_tree(
    level: int,
    category_id: int,
    node: TreeNode,
    max_level: int,
    cache: LevelCache,
    source: CategorySource | BaseSource,
) -> None:
    """Attach up to two children to *node* and recurse into them.

    Args:
        level:       Level of *node*, 0 for the root.
        category_id: Catalog id whose children are fetched for *node*.
        node:        Node to populate in place.
        max_level:   Level at which recursion stops.
        cache:       Lookup memo shared by the whole build.
        source:      Where children are fetched from.

    Raises:
        CategorySourceError: A lookup failed for a reason other than
            not-found. The build is aborted.
    """
    cache.bump(level)

    if level == max_level:
        return

    result = cache.lookup(level)
    if result is None:
        result = source.fetch_children(category_id)
        if not (result.is_found or result.is_not_found):
            raise CategorySourceError(category_id, result.detail)
        cache.store(level, result)
    else:
        logger.debug("Level %d: reusing cached children for category %d", level, category_id)

    if result.is_not_found:
        logger.debug("Category %d not found mid-build, leaving it childless", category_id)

    for category in result.categories[:MAX_CHILDREN]:
        if cache.count(level) >= MAX_CHILDREN:
            logger.debug("Level %d is full, skipping remaining children of %d", level, category_id)
            break
        child = node.add_child(TreeNode(label=category.name, id=category.id))
        fill_tree(level + 1, category.id, child, max_level, cache, source)
