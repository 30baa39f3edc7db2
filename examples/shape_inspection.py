#!/usr/bin/env python3
"""
Inspecting tree shape with OrderedTreeLib.

This example demonstrates:
- Walking a tree in different orders
- Printing the shape from pre-order (value, depth) pairs
- How insertion order changes shape but never sorted output
"""

import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from orderedtreelib import (
    DataRequirement,
    collect_tree_data,
    from_iterable,
    get_tree_stats,
    traverse,
    traverse_tree,
)


def print_shape(tree):
    """Print one value per line, indented by depth, with its path."""
    for value, path in collect_tree_data(tree, DataRequirement.PATH, order="pre"):
        label = "".join(path) or "root"
        print(f"    {'  ' * len(path)}{value}  ({label})")


def describe(title, items):
    tree = from_iterable(items)
    stats = get_tree_stats(tree)

    print(f"\n{title}: {items}")
    print(f"  sorted:      {list(traverse(tree))}")
    print(f"  pre-order:   {list(traverse_tree(tree, order='pre'))}")
    print(f"  level-order: {list(traverse_tree(tree, order='level'))}")
    print(f"  height {stats['height']} for {stats['size']} values"
          f"{' (degenerate)' if stats['is_degenerate'] else ''}")
    print("  shape:")
    print_shape(tree)


def main():
    print("=" * 60)
    print("OrderedTreeLib - Shape Inspection")
    print("=" * 60)

    describe("Mixed order", [3, 7, 1, 5, 2, 6, 4])
    describe("Sorted order", [1, 2, 3, 4, 5, 6, 7])


if __name__ == "__main__":
    main()
