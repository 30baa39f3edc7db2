"""Basic tests for OrderedTreeLib functionality.

This test file demonstrates that insert and traverse work correctly.
"""

import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from orderedtreelib import (
    EMPTY,
    Node,
    empty,
    insert,
    traverse,
    from_iterable,
)


def build_reference_tree():
    """Build the tree used throughout the test suite.

    Inserting 3, 7, 1, 5, 2, 6, 4 in that order gives:

            3
           / \\
          1   7
           \\  /
           2 5
            / \\
           4   6
    """
    tree = empty()
    for value in [3, 7, 1, 5, 2, 6, 4]:
        tree = insert(value, tree)
    return tree


def test_reference_scenario():
    """Test the documented insertion example."""
    print("\n=== Test: Reference Scenario ===")

    tree = build_reference_tree()
    values = list(traverse(tree))

    print(f"Traversal: {values}")
    assert values == [1, 2, 3, 4, 5, 6, 7]
    print("[PASS] Reference scenario passed")


def test_reference_tree_shape():
    """Test that the shape follows insertion order exactly."""
    tree = build_reference_tree()

    assert tree.value == 3
    assert tree.left.value == 1
    assert tree.left.left is EMPTY
    assert tree.left.right.value == 2
    assert tree.right.value == 7
    assert tree.right.right is EMPTY
    assert tree.right.left.value == 5
    assert tree.right.left.left.value == 4
    assert tree.right.left.right.value == 6


def test_empty_tree_traversal():
    """Test that the empty tree yields nothing."""
    assert list(traverse(empty())) == []
    assert empty() is EMPTY


def test_insert_into_empty():
    """Test that inserting into EMPTY makes a single leaf."""
    tree = insert(42, empty())

    assert isinstance(tree, Node)
    assert tree.value == 42
    assert tree.left is EMPTY
    assert tree.right is EMPTY
    assert tree.is_leaf()


def test_duplicates_are_preserved():
    """Test that equal values are kept, not merged."""
    print("\n=== Test: Duplicate Preservation ===")

    tree = insert(5, insert(5, empty()))

    assert list(traverse(tree)) == [5, 5]
    # The second 5 goes to the right of the first
    assert tree.left is EMPTY
    assert tree.right.value == 5
    print("[PASS] Duplicates preserved")


def test_count_matches_inserts():
    """Test that traversal length equals number of inserts."""
    items = [4, 1, 4, 9, 0, 4, 1]
    tree = from_iterable(items)

    assert len(list(traverse(tree))) == len(items)
    assert list(traverse(tree)) == sorted(items)


def test_insert_does_not_modify_input():
    """Test persistence: the old tree is unchanged after insert."""
    print("\n=== Test: Persistence ===")

    tree1 = build_reference_tree()
    before = list(traverse(tree1))

    tree2 = insert(8, tree1)

    assert list(traverse(tree1)) == before
    assert 8 not in list(traverse(tree1))
    assert list(traverse(tree2)) == [1, 2, 3, 4, 5, 6, 7, 8]
    print("[PASS] Input tree unchanged")


def test_untouched_subtrees_are_shared():
    """Test that insert only rebuilds the search path."""
    tree1 = build_reference_tree()
    tree2 = insert(8, tree1)

    # 8 goes right at the root and right at 7
    assert tree2 is not tree1
    assert tree2.left is tree1.left
    assert tree2.right is not tree1.right
    assert tree2.right.left is tree1.right.left


def test_traverse_is_restartable():
    """Test that traversing twice gives the same sequence."""
    tree = build_reference_tree()

    first = list(traverse(tree))
    second = list(traverse(tree))

    assert first == second


def test_interleaved_readers():
    """Test that two iterators over one tree do not interfere."""
    tree = build_reference_tree()
    reader_a = traverse(tree)
    reader_b = traverse(tree)

    seen_a, seen_b = [], []
    for a, b in zip(reader_a, reader_b):
        seen_a.append(a)
        seen_b.append(b)

    assert seen_a == seen_b == [1, 2, 3, 4, 5, 6, 7]


def test_works_with_strings_and_tuples():
    """Test that any orderable type works."""
    words = from_iterable(["pear", "apple", "fig", "apple"])
    assert list(traverse(words)) == ["apple", "apple", "fig", "pear"]

    pairs = from_iterable([(2, "b"), (1, "z"), (2, "a")])
    assert list(traverse(pairs)) == [(1, "z"), (2, "a"), (2, "b")]


if __name__ == "__main__":
    test_reference_scenario()
    test_duplicates_are_preserved()
    test_insert_does_not_modify_input()
    print("\n[SUCCESS] All basic tests passed")
