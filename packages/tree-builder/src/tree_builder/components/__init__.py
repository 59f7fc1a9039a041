from .cache import LevelCache
from .node import TreeNode, depth

__all__ = ["LevelCache", "TreeNode", "depth"]
