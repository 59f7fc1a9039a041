"""Bounded category tree construction.

Public names live in ``tree_builder.build_tree`` and
``tree_builder.components``.
"""
