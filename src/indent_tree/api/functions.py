"""Module-level API over indentation trees.

These functions are the simplest entry point: each takes a tree value and
addresses or text and returns a new value, never mutating its input. They
delegate to ``IndentTree`` so strict-mode checks apply uniformly.

Examples:
    >>> tree = parse("a\\n  b\\n  c\\n    d")
    >>> children_of(tree, 1)
    [2, 3]
    >>> str(append_child(tree, 1, "e"))
    'a\\n  b\\n  c\\n    d\\n  e'
"""

from typing import List, Optional

from indent_tree.shared import TreeConfig
from indent_tree.tree import ChildrenMode, IndentTree, ReadMode, Visitor


def init(config: Optional[TreeConfig] = None) -> IndentTree:
    """Return the empty tree."""
    return IndentTree((), config or TreeConfig())


def parse(text: str, config: Optional[TreeConfig] = None) -> IndentTree:
    """Return the tree whose textual form is ``text``."""
    return IndentTree.from_text(text, config)


def parent_of(tree: IndentTree, address: int) -> int:
    """Return the parent address of ``address`` (0 for top-level nodes)."""
    return tree.parent_of(address)


def children_of(
    tree: IndentTree,
    address: int,
    mode: ChildrenMode = ChildrenMode.DIRECT_ONLY
) -> List[int]:
    """Return the children (or all descendants) of ``address`` in order."""
    return tree.children_of(address, mode)


def is_leaf(tree: IndentTree, address: int) -> bool:
    """Return True when ``address`` has no direct children."""
    return tree.is_leaf(address)


def visit_depth_first(
    tree: IndentTree,
    visitor: Visitor,
    address: Optional[int] = None
) -> None:
    """Call ``visitor`` for every node in pre-order."""
    tree.visit_depth_first(visitor, address)


def read_node(
    tree: IndentTree,
    address: int,
    mode: ReadMode = ReadMode.SELF_ONLY
) -> str:
    """Return a node's label, or its dedented subtree."""
    return tree.read_node(address, mode)


def append_child(tree: IndentTree, address: int, node_text: str) -> IndentTree:
    """Return a new tree with ``node_text`` appended as the last child of ``address``."""
    return tree.append_child(address, node_text)
