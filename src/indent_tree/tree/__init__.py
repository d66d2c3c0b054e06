"""Tree layer: navigation, traversal, node access and validation.

Key Components:
    IndentTree: Immutable tree value backed only by its indented lines
    ChildrenMode / ReadMode: Selectors for direct children or whole blocks
    NodeVisit: Record passed to depth-first visitors
    IndentationValidator: Optional check of the indentation invariant
"""

from .navigation import ChildrenMode
from .node import ReadMode
from .traversal import NodeVisit, Visitor
from .validation import (
    AddressOutOfRangeError,
    IndentationValidator,
    MalformedTreeError,
    TreeError,
    ValidationIssue,
    ValidationIssueType,
    ValidationResult,
)
from .model import IndentTree

__all__ = [
    "AddressOutOfRangeError",
    "ChildrenMode",
    "IndentTree",
    "IndentationValidator",
    "MalformedTreeError",
    "NodeVisit",
    "ReadMode",
    "TreeError",
    "ValidationIssue",
    "ValidationIssueType",
    "ValidationResult",
    "Visitor",
]
