"""Public API layer for indentation trees."""

from .functions import (
    append_child,
    children_of,
    init,
    is_leaf,
    parent_of,
    parse,
    read_node,
    visit_depth_first,
)

__all__ = [
    "append_child",
    "children_of",
    "init",
    "is_leaf",
    "parent_of",
    "parse",
    "read_node",
    "visit_depth_first",
]
