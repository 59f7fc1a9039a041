from tree_filler.fill_tree import MAX_CHILDREN, fill_tree

__all__ = ["MAX_CHILDREN", "fill_tree"]
