"""Tests for pre-order depth-first traversal."""

import types
from typing import List

import pytest

from indent_tree.tree import IndentTree, NodeVisit
from indent_tree.tree.traversal import iter_depth_first, visit_depth_first

FOREST = "root\n  one\n    one-a\n    one-b\n  two\nother\n  three"


@pytest.fixture
def forest() -> IndentTree:
    return IndentTree.from_text(FOREST)


def collect(tree: IndentTree, **kwargs) -> List[NodeVisit]:
    visits: List[NodeVisit] = []
    visit_depth_first(tree, visits.append, **kwargs)
    return visits


class TestVisitDepthFirst:
    """Test visitor invocation order and metadata."""

    def test_visits_every_line_once_in_document_order(self, forest: IndentTree) -> None:
        """Test total visitation over a multi-root tree."""
        visits = collect(forest)
        assert [v.address for v in visits] == [1, 2, 3, 4, 5, 6, 7]

    def test_visit_records(self, forest: IndentTree) -> None:
        """Test labels, sibling indices, leaf flags and depths."""
        visits = collect(forest)
        assert [(v.label, v.sibling_index, v.is_leaf, v.depth) for v in visits] == [
            ("root", 1, False, 1),
            ("one", 1, False, 2),
            ("one-a", 1, True, 3),
            ("one-b", 2, True, 3),
            ("two", 2, True, 2),
            ("other", 2, False, 1),
            ("three", 1, True, 2),
        ]

    def test_explicit_start_walks_only_that_subtree(self, forest: IndentTree) -> None:
        """Test starting at a node restricts the walk to its block."""
        visits = collect(forest, address=2)
        assert [v.label for v in visits] == ["one", "one-a", "one-b"]
        assert visits[0].depth == 1
        assert visits[0].sibling_index == 1

    def test_explicit_depth_and_sibling_index(self, forest: IndentTree) -> None:
        """Test caller-provided positional metadata is threaded through."""
        visits = collect(forest, address=6, sibling_index=2, depth=4)
        assert [(v.sibling_index, v.depth) for v in visits] == [(2, 4), (1, 5)]

    def test_sibling_index_restarts_per_parent(self) -> None:
        """Test each sibling group counts from 1."""
        tree = IndentTree.from_text("a\n  b\n    c\n    d\n  e\n    f")
        visits = {v.label: v.sibling_index for v in collect(tree)}
        assert visits == {"a": 1, "b": 1, "c": 1, "d": 2, "e": 2, "f": 1}

    def test_parents_before_descendants(self, forest: IndentTree) -> None:
        """Test pre-order: every node precedes its descendants."""
        order = [v.address for v in collect(forest)]
        for address in order:
            for descendant in forest.children_of(address):
                assert order.index(address) < order.index(descendant)

    def test_empty_tree_visits_nothing(self) -> None:
        """Test the empty tree."""
        assert collect(IndentTree()) == []

    def test_out_of_range_start_visits_nothing(self, forest: IndentTree) -> None:
        """Test an absent start address."""
        assert collect(forest, address=99) == []
        assert collect(forest, address=0) == []

    def test_traversal_does_not_mutate(self, forest: IndentTree) -> None:
        """Test the buffer is unchanged after a walk."""
        collect(forest)
        assert forest.to_text() == FOREST

    def test_walks_chains_deeper_than_recursion_limit(self) -> None:
        """Test a 1200-level chain is walked without running out of stack."""
        tree = IndentTree.from_text("\n".join("  " * i + f"n{i}" for i in range(1200)))
        visits = collect(tree)

        assert len(visits) == 1200
        assert [v.depth for v in visits] == list(range(1, 1201))
        assert all(v.sibling_index == 1 for v in visits)
        assert visits[-1].label == "n1199"
        assert visits[-1].is_leaf
        assert not visits[-2].is_leaf


class TestIterDepthFirst:
    """Test the iterator form of the traversal."""

    def test_matches_visitor(self, forest: IndentTree) -> None:
        """Test both forms produce identical records."""
        assert list(iter_depth_first(forest)) == collect(forest)

    def test_is_lazy_generator(self, forest: IndentTree) -> None:
        """Test records are produced on demand."""
        walk = iter_depth_first(forest)
        assert isinstance(walk, types.GeneratorType)
        assert next(walk).label == "root"
        assert next(walk).label == "one"

    def test_deep_chain_matches_visitor(self) -> None:
        """Test the iterator form also handles very deep nesting."""
        tree = IndentTree.from_text("\n".join("  " * i + f"n{i}" for i in range(1200)))
        assert list(iter_depth_first(tree, 1)) == collect(tree, address=1)

    def test_tree_is_iterable(self, forest: IndentTree) -> None:
        """Test iterating a tree yields its visits."""
        assert [v.label for v in forest][:2] == ["root", "one"]

    def test_node_visit_is_immutable(self, forest: IndentTree) -> None:
        """Test visit records are frozen."""
        visit = next(iter_depth_first(forest))
        with pytest.raises(AttributeError):
            visit.label = "changed"  # type: ignore[misc]
