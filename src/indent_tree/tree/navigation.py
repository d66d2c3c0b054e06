"""Structural navigation derived purely from indentation widths.

Parent, children and leaf status are recomputed by scanning the buffer on
every call. The end of a node's block is the first following line whose
indentation drops below the node's child indentation, so no end markers are
needed. Results on malformed indentation are unspecified but never raise.
"""

from enum import Enum
from typing import TYPE_CHECKING, List

from indent_tree.text.lines import ROOT_ADDRESS, indent_width_at, is_valid_address

if TYPE_CHECKING:
    from indent_tree.tree.model import IndentTree


class ChildrenMode(Enum):
    """Which part of a node's block ``children_of`` collects."""

    DIRECT_ONLY = "direct_only"
    ALL_DESCENDANTS = "all_descendants"


def _indent(tree: "IndentTree", address: int) -> int:
    return indent_width_at(tree.lines, address, tree.config.indent_char)


def _child_indent(tree: "IndentTree", address: int) -> int:
    # Top-level nodes are the root's children and carry no indentation.
    if address == ROOT_ADDRESS:
        return 0
    return _indent(tree, address) + tree.config.indent_unit


def parent_of(tree: "IndentTree", address: int) -> int:
    """Return the address of the parent of ``address``.

    Scans backward for the nearest line indented exactly one unit less.
    Top-level nodes, the root itself and unmatched scans yield 0.
    """
    if address <= ROOT_ADDRESS:
        return ROOT_ADDRESS

    target = _indent(tree, address) - tree.config.indent_unit
    for cursor in range(min(address, len(tree.lines) + 1) - 1, ROOT_ADDRESS, -1):
        if _indent(tree, cursor) == target:
            return cursor
    return ROOT_ADDRESS


def children_of(
    tree: "IndentTree",
    address: int,
    mode: ChildrenMode = ChildrenMode.DIRECT_ONLY
) -> List[int]:
    """Return child addresses of ``address`` in document (sibling) order.

    Args:
        tree: Tree to scan
        address: Node address, 0 for the virtual root
        mode: DIRECT_ONLY for children exactly one unit deeper,
            ALL_DESCENDANTS for the whole contiguous block below the node

    Returns:
        Strictly increasing list of addresses, empty for leaves and for
        addresses outside the buffer
    """
    if address != ROOT_ADDRESS and not is_valid_address(tree.lines, address):
        return []

    child_indent = _child_indent(tree, address)
    found: List[int] = []
    cursor = address + 1
    while cursor <= len(tree.lines):
        indent = _indent(tree, cursor)
        if indent < child_indent:
            break
        if mode is ChildrenMode.ALL_DESCENDANTS or indent == child_indent:
            found.append(cursor)
        cursor += 1
    return found


def is_leaf(tree: "IndentTree", address: int) -> bool:
    """Return True when ``address`` has no direct children."""
    return not children_of(tree, address, ChildrenMode.DIRECT_ONLY)


def subtree_end(tree: "IndentTree", address: int) -> int:
    """Return the last address of the block rooted at ``address``.

    For a childless node this is the node itself; for the root it is the
    last line of the buffer (0 when the buffer is empty).
    """
    descendants = children_of(tree, address, ChildrenMode.ALL_DESCENDANTS)
    if descendants:
        return descendants[-1]
    return address


def depth_of(tree: "IndentTree", address: int) -> int:
    """Return the nesting depth of ``address`` (0 for top-level nodes)."""
    return _indent(tree, address) // tree.config.indent_unit
