"""Presentation helpers."""

from .selection import SelectionMessage, build_selection
from .tree import get_children, get_label, get_tooltip, is_collapsible, render_tree

__all__ = [
    "SelectionMessage",
    "build_selection",
    "get_children",
    "get_label",
    "get_tooltip",
    "is_collapsible",
    "render_tree",
]
