#!/usr/bin/env python3
"""
Quick Start Guide for Indent Tree.

Builds a small outline, queries it, walks it, grafts a copied subtree
elsewhere and validates the result.
"""

import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from indent_tree import (
    ChildrenMode,
    NodeVisit,
    ReadMode,
    TreeConfig,
    append_child,
    children_of,
    init,
    parse,
    read_node,
    visit_depth_first,
)
from indent_tree.tree import MalformedTreeError


def quick_start_example():
    """Quick start example showing basic usage."""

    print("QUICK START - Indent Tree")
    print("=" * 45)

    # Step 1: Build a tree by threading each new value forward
    print("\nStep 1: Building a tree")
    print("-" * 30)

    tree = init()
    tree = append_child(tree, 0, "groceries")
    tree = append_child(tree, 1, "fruit")
    tree = append_child(tree, 2, "apples\n  green\n  red")
    tree = append_child(tree, 1, "bread")
    tree = append_child(tree, 0, "chores")

    print(tree)

    # Step 2: Query structure
    print("\nStep 2: Navigation")
    print("-" * 30)

    print(f"Top-level nodes:       {children_of(tree, 0)}")
    print(f"Children of line 1:    {children_of(tree, 1)}")
    print(f"Descendants of line 1: {children_of(tree, 1, ChildrenMode.ALL_DESCENDANTS)}")
    print(f"Parent of line 4:      {tree.parent_of(4)}")

    # Step 3: Walk depth-first
    print("\nStep 3: Depth-first walk")
    print("-" * 30)

    def show(visit: NodeVisit) -> None:
        marker = "-" if visit.is_leaf else "+"
        print(f"{'  ' * (visit.depth - 1)}{marker} {visit.sibling_index}. {visit.label}")

    visit_depth_first(tree, show)

    # Step 4: Copy a subtree under a different parent
    print("\nStep 4: Rebasing a subtree")
    print("-" * 30)

    block = read_node(tree, 3, ReadMode.ALL_DESCENDANTS)
    print(f"Read block:\n{block}")
    tree = append_child(tree, 7, block)
    print(f"\nAfter grafting under 'chores':\n{tree}")

    # Step 5: Validation and strict mode
    print("\nStep 5: Validation")
    print("-" * 30)

    messy = parse("a\n     b\n  c")
    result = messy.validate()
    print(f"Valid: {result.success}, errors: {result.error_count}")
    for issue in result.issues:
        print(f"  line {issue.address}: {issue.message}")

    try:
        parse("a\n     b", TreeConfig.strict_mode())
    except MalformedTreeError as e:
        print(f"Strict mode rejected the buffer: {e}")


if __name__ == "__main__":
    quick_start_example()
