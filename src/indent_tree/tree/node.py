"""Node access and mutation over an indentation tree.

Reading a node with its descendants yields a dedented, relocatable block of
text. Appending adds a base indentation to every supplied line, so such a
block can be grafted under any other parent in a single splice.
"""

from enum import Enum
from typing import TYPE_CHECKING

from indent_tree.shared import get_logger
from indent_tree.text.lines import (
    ROOT_ADDRESS,
    indent_width_at,
    insert_after,
    is_valid_address,
    join_lines,
    make_indent,
    split_lines,
)
from indent_tree.tree.navigation import ChildrenMode, children_of, subtree_end

if TYPE_CHECKING:
    from indent_tree.tree.model import IndentTree


class ReadMode(Enum):
    """How much of a node ``read_node`` returns."""

    SELF_ONLY = "self_only"
    ALL_DESCENDANTS = "all_descendants"


def _strip_prefix(line: str, prefix: str) -> str:
    if line.startswith(prefix):
        return line[len(prefix):]
    return line


def read_node(
    tree: "IndentTree",
    address: int,
    mode: ReadMode = ReadMode.SELF_ONLY
) -> str:
    """Return the text of the node at ``address``.

    With SELF_ONLY the bare label is returned. With ALL_DESCENDANTS the node
    line is followed by every descendant line, each with the node's own
    indentation stripped, preserving the subtree's internal relative
    indentation. Reading the root with ALL_DESCENDANTS returns the whole
    document; any other address outside the buffer reads as ``""``.

    Examples:
        >>> tree = IndentTree.from_text("a\\n  b\\n  c\\n    d")
        >>> read_node(tree, 3, ReadMode.ALL_DESCENDANTS)
        'c\\n  d'
    """
    lines = tree.lines
    if address == ROOT_ADDRESS:
        if mode is ReadMode.ALL_DESCENDANTS:
            return join_lines(lines)
        return ""
    if not is_valid_address(lines, address):
        return ""

    prefix = make_indent(indent_width_at(lines, address, tree.config.indent_char),
                         tree.config.indent_char)
    selected = [address]
    if mode is ReadMode.ALL_DESCENDANTS:
        selected.extend(children_of(tree, address, ChildrenMode.ALL_DESCENDANTS))

    return join_lines(_strip_prefix(lines[cursor - 1], prefix) for cursor in selected)


def append_child(tree: "IndentTree", address: int, node_text: str) -> "IndentTree":
    """Return a new tree with ``node_text`` appended as the last child of ``address``.

    The new lines go after the last line of the target's block, so existing
    children keep their order and their own descendants. ``node_text`` may
    span several lines with relative indentation (for example the output
    of ``read_node(..., ReadMode.ALL_DESCENDANTS)``); the child indentation
    is added uniformly to each of them.
    """
    logger = get_logger(__name__, tree.config.correlation_id, "append_child")

    if address == ROOT_ADDRESS:
        indent = 0
    else:
        indent = (indent_width_at(tree.lines, address, tree.config.indent_char)
                  + tree.config.indent_unit)
    target = subtree_end(tree, address)

    new_lines = insert_after(tree.lines, target, node_text, indent,
                             tree.config.indent_char)

    if logger.is_debug_enabled():
        logger.debug(
            "Appended child node",
            extra={
                "parent_address": address,
                "insert_after": target,
                "indent": indent,
                "lines_inserted": len(split_lines(node_text)),
            }
        )
    return tree.with_lines(new_lines)


def copy_subtree(tree: "IndentTree", source: int, target: int) -> "IndentTree":
    """Return a new tree with the subtree at ``source`` copied under ``target``.

    The source block is read dedented and rebased at the target's child
    indentation. Copying a node under itself or one of its own descendants
    is allowed: the block read before the splice is what gets inserted.
    """
    block = read_node(tree, source, ReadMode.ALL_DESCENDANTS)
    return append_child(tree, target, block)
