#!/usr/bin/env python3
"""
Basic usage of OrderedTreeLib.

This example demonstrates:
- Building a tree with insert and from_iterable
- Reading values back in sorted order
- Old trees staying valid after new inserts
- Handling values that cannot be ordered
"""

import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from orderedtreelib import (
    CollectErrorsPolicy,
    IncomparableValues,
    empty,
    from_iterable,
    insert,
    traverse,
)


def main():
    print("=" * 60)
    print("OrderedTreeLib - Basic Usage")
    print("=" * 60)

    # Build one insert at a time
    tree = empty()
    for value in [3, 7, 1, 5, 2, 6, 4]:
        tree = insert(value, tree)
    print(f"\nSorted: {list(traverse(tree))}")

    # Duplicates are kept
    with_dupes = insert(5, tree)
    print(f"After inserting another 5: {list(traverse(with_dupes))}")

    # The original tree did not change
    print(f"Original is untouched:     {list(traverse(tree))}")

    # Values that cannot be compared
    try:
        insert("seven", tree)
    except IncomparableValues as error:
        print(f"\nRejected: {error}")

    # Bulk build that skips bad values instead of stopping
    policy = CollectErrorsPolicy()
    mixed = from_iterable([10, "x", 4, None, 8], on_error=policy)
    print(f"\nBuilt from mixed input: {list(traverse(mixed))}")
    print(f"Skipped: {[e['item'] for e in policy.get_errors()]}")


if __name__ == "__main__":
    main()
