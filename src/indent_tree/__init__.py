"""Indent Tree.

Hierarchical data whose only physical form is indented text. Parent/child
relationships are encoded by leading indentation, one fixed unit per level,
and every query re-scans the lines, so a tree is always its own
serialization.

Progressive API Disclosure:
- Level 1: Simple functions - init(), parse(), parent_of(), children_of(),
  is_leaf(), visit_depth_first(), read_node(), append_child()
- Level 2: Tree value - IndentTree with a TreeConfig
- Level 3: Validation - IndentationValidator and strict mode
"""

__version__ = "0.1.0"
__author__ = "Indent Tree Team"

from .api import (
    append_child,
    children_of,
    init,
    is_leaf,
    parent_of,
    parse,
    read_node,
    visit_depth_first,
)
from .shared.config import IndentTreeConfig, TreeConfig
from .tree import (
    ChildrenMode,
    IndentationValidator,
    IndentTree,
    MalformedTreeError,
    NodeVisit,
    ReadMode,
    TreeError,
)

__all__ = [
    # Version and metadata
    "__author__",
    "__version__",

    # Level 1: Simple functions
    "init",
    "parse",
    "parent_of",
    "children_of",
    "is_leaf",
    "visit_depth_first",
    "read_node",
    "append_child",

    # Level 2: Tree value and selectors
    "IndentTree",
    "ChildrenMode",
    "ReadMode",
    "NodeVisit",

    # Level 3: Validation and configuration
    "IndentationValidator",
    "MalformedTreeError",
    "TreeError",
    "TreeConfig",
    "IndentTreeConfig",
]
