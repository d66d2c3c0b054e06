"""The indentation tree value.

An ``IndentTree`` is nothing more than an immutable tuple of lines plus the
encoding configuration. Every operation re-scans the lines; every mutation
returns a new value, so callers thread the result of one mutation into the
next and re-resolve any addresses they hold.
"""

from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Optional, Tuple

from indent_tree.shared import TreeConfig, get_logger
from indent_tree.text.lines import indent_width_at, join_lines, line_at, split_lines
from indent_tree.tree import navigation, node, traversal
from indent_tree.tree.navigation import ChildrenMode
from indent_tree.tree.node import ReadMode
from indent_tree.tree.traversal import NodeVisit, Visitor
from indent_tree.tree.validation import (
    AddressOutOfRangeError,
    IndentationValidator,
    MalformedTreeError,
    ValidationResult,
)


@dataclass(frozen=True)
class IndentTree:
    """Immutable tree whose only representation is its indented lines.

    Addresses are 1-based document positions; 0 is the virtual root. In
    the default lenient mode no operation raises on malformed input. With
    ``TreeConfig(strict=True)`` the buffer is validated on construction and
    every address is range-checked.
    """

    lines: Tuple[str, ...] = ()
    config: TreeConfig = field(default_factory=TreeConfig)

    def __post_init__(self) -> None:
        if not isinstance(self.lines, tuple):
            object.__setattr__(self, "lines", tuple(self.lines))
        if self.config.strict:
            result = self.validate()
            if not result.success:
                logger = get_logger(__name__, self.config.correlation_id, "indent_tree")
                logger.warning(
                    "Rejected malformed tree in strict mode",
                    extra={"error_count": result.error_count}
                )
                raise MalformedTreeError(result)

    @classmethod
    def from_text(cls, text: str, config: Optional[TreeConfig] = None) -> "IndentTree":
        """Build a tree from its textual form."""
        return cls(tuple(split_lines(text)), config or TreeConfig())

    @classmethod
    def from_lines(cls, lines: Iterable[str],
                   config: Optional[TreeConfig] = None) -> "IndentTree":
        """Build a tree from already split lines."""
        return cls(tuple(lines), config or TreeConfig())

    def to_text(self) -> str:
        """Return the textual form; it is the tree's own serialization."""
        return join_lines(self.lines)

    def with_lines(self, lines: Iterable[str]) -> "IndentTree":
        """Return a tree with the same configuration over new lines."""
        return IndentTree(tuple(lines), self.config)

    def __str__(self) -> str:
        return self.to_text()

    def __len__(self) -> int:
        return len(self.lines)

    def __iter__(self) -> Iterator[NodeVisit]:
        return self.iter_depth_first()

    def _check_address(self, address: int) -> None:
        if not self.config.strict:
            return
        if IndentationValidator(self.config).check_address(self, address):
            raise AddressOutOfRangeError(address, len(self.lines))

    def line_at(self, address: int) -> str:
        """Return the raw line at ``address``."""
        self._check_address(address)
        return line_at(self.lines, address)

    def indent_at(self, address: int) -> int:
        """Return the indentation width at ``address`` (0 for the root)."""
        self._check_address(address)
        return indent_width_at(self.lines, address, self.config.indent_char)

    def depth_of(self, address: int) -> int:
        """Return the nesting depth of ``address`` (0 for top-level nodes)."""
        self._check_address(address)
        return navigation.depth_of(self, address)

    def parent_of(self, address: int) -> int:
        """Return the parent address (0 for top-level nodes and the root)."""
        self._check_address(address)
        return navigation.parent_of(self, address)

    def children_of(self, address: int,
                    mode: ChildrenMode = ChildrenMode.DIRECT_ONLY) -> List[int]:
        """Return child or descendant addresses in document order."""
        self._check_address(address)
        return navigation.children_of(self, address, mode)

    def is_leaf(self, address: int) -> bool:
        """Return True when ``address`` has no direct children."""
        self._check_address(address)
        return navigation.is_leaf(self, address)

    def read_node(self, address: int, mode: ReadMode = ReadMode.SELF_ONLY) -> str:
        """Return a node's label, or its dedented subtree."""
        self._check_address(address)
        return node.read_node(self, address, mode)

    def append_child(self, address: int, node_text: str) -> "IndentTree":
        """Return a new tree with ``node_text`` appended as last child of ``address``."""
        self._check_address(address)
        return node.append_child(self, address, node_text)

    def copy_subtree(self, source: int, target: int) -> "IndentTree":
        """Return a new tree with the subtree at ``source`` copied under ``target``."""
        self._check_address(source)
        self._check_address(target)
        return node.copy_subtree(self, source, target)

    def visit_depth_first(self, visitor: Visitor, address: Optional[int] = None) -> None:
        """Walk the tree in pre-order, calling ``visitor`` for every node."""
        if address is not None:
            self._check_address(address)
        traversal.visit_depth_first(self, visitor, address)

    def iter_depth_first(self, address: Optional[int] = None) -> Iterator[NodeVisit]:
        """Iterate the pre-order NodeVisit records."""
        if address is not None:
            self._check_address(address)
        return traversal.iter_depth_first(self, address)

    def validate(self) -> ValidationResult:
        """Run the indentation validator over this tree."""
        return IndentationValidator(self.config).validate(self)
