from __future__ import annotations

from pydantic import BaseModel


class TreeNode(BaseModel):
    """One category in a built tree. Holds at most two children."""

    label: str
    id: int
    first_child: TreeNode | None = None
    last_child: TreeNode | None = None

    def add_child(self, child: TreeNode) -> TreeNode:
        """Append *child* after any existing child and return it.

        Raises:
            ValueError: If the node already has two children.
        """
        if self.first_child is None:
            self.first_child = child
        elif self.last_child is None:
            self.last_child = child
        else:
            raise ValueError(f"Node {self.label!r} already has two children")
        return child

    @property
    def children(self) -> list[TreeNode]:
        return [c for c in (self.first_child, self.last_child) if c is not None]

    @property
    def is_leaf(self) -> bool:
        return self.first_child is None

    @property
    def size(self) -> int:
        """Number of nodes in the subtree rooted here, this node included."""
        return 1 + sum(child.size for child in self.children)


def depth(node: TreeNode | None) -> int:
    """Zero-based depth of the subtree rooted at *node*; -1 for no node.

        1 = root
       / \\
      2   3
     / \\
    4   5

    depth(root) == 2, depth(root.first_child) == 1, depth(root.last_child) == 0
    """
    if node is None:
        return -1
    return 1 + max(depth(node.first_child), depth(node.last_child))
