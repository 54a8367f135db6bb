"""
Tree rendering (ASCII art).
"""
from .ascii import (
    branch_lengths,
    canvas_size,
    render_tree,
    render_tree_string,
    TreeRenderer,
)

__all__ = [
    "branch_lengths",
    "canvas_size",
    "render_tree",
    "render_tree_string",
    "TreeRenderer",
]
