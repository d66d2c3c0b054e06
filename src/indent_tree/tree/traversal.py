"""Pre-order depth-first traversal of an indentation tree.

The walk keeps its own stack of pending nodes instead of recursing, so
trees nested far deeper than the interpreter's recursion limit are walked
like any other.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Iterator, List, Optional, Tuple

from indent_tree.text.lines import ROOT_ADDRESS, is_valid_address
from indent_tree.tree.navigation import ChildrenMode, children_of
from indent_tree.tree.node import ReadMode, read_node

if TYPE_CHECKING:
    from indent_tree.tree.model import IndentTree


@dataclass(frozen=True)
class NodeVisit:
    """Positional record handed to a visitor for each node."""

    label: str
    address: int
    sibling_index: int
    is_leaf: bool
    depth: int


Visitor = Callable[[NodeVisit], None]

# (address, sibling_index, depth)
_Pending = Tuple[int, int, int]


def _siblings(addresses: List[int], depth: int) -> List[_Pending]:
    # Reversed so the first sibling is popped first
    pending = [(child, index, depth) for index, child in enumerate(addresses, start=1)]
    pending.reverse()
    return pending


def iter_depth_first(
    tree: "IndentTree",
    address: Optional[int] = None,
    sibling_index: int = 1,
    depth: int = 1
) -> Iterator[NodeVisit]:
    """Yield a NodeVisit for each node in pre-order.

    Args:
        tree: Tree to walk; it is never modified
        address: Node to start from. When omitted every top-level node is
            walked in turn, so each line of the buffer is visited exactly once
        sibling_index: 1-based position of ``address`` among its siblings
        depth: Depth reported for ``address``; children get ``depth + 1``

    Yields:
        One record per visited node, parents before their descendants
    """
    if address is None:
        stack = _siblings(children_of(tree, ROOT_ADDRESS, ChildrenMode.DIRECT_ONLY), depth)
    elif is_valid_address(tree.lines, address):
        stack = [(address, sibling_index, depth)]
    else:
        return

    while stack:
        current, index, level = stack.pop()
        children = children_of(tree, current, ChildrenMode.DIRECT_ONLY)
        yield NodeVisit(
            label=read_node(tree, current, ReadMode.SELF_ONLY),
            address=current,
            sibling_index=index,
            is_leaf=not children,
            depth=level,
        )
        stack.extend(_siblings(children, level + 1))


def visit_depth_first(
    tree: "IndentTree",
    visitor: Visitor,
    address: Optional[int] = None,
    sibling_index: int = 1,
    depth: int = 1
) -> None:
    """Walk the tree in pre-order, calling ``visitor`` once per node.

    Takes the same positional arguments as :func:`iter_depth_first`.
    """
    for visit in iter_depth_first(tree, address, sibling_index, depth):
        visitor(visit)
