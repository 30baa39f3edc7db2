"""Unit tests for edge cases in OrderedTreeLib.

Tests unusual inputs, the Tree convenience protocol and the
immutability guarantees of nodes.
"""

import dataclasses
import pickle
import unittest

from orderedtreelib import (
    EMPTY,
    Empty,
    Node,
    Tree,
    empty,
    insert,
    traverse,
    from_iterable,
)


class TestEmptyTree(unittest.TestCase):
    """Test the EMPTY singleton."""

    def test_single_instance(self):
        """Every Empty() is the same object."""
        self.assertIs(Empty(), EMPTY)
        self.assertIs(empty(), EMPTY)

    def test_empty_is_falsy_and_sized(self):
        self.assertFalse(EMPTY)
        self.assertEqual(len(EMPTY), 0)
        self.assertTrue(EMPTY.is_empty())
        self.assertTrue(EMPTY.is_leaf())

    def test_pickle_keeps_singleton(self):
        self.assertIs(pickle.loads(pickle.dumps(EMPTY)), EMPTY)

    def test_repr(self):
        self.assertEqual(repr(EMPTY), "Empty()")

    def test_nothing_is_contained(self):
        self.assertNotIn(1, EMPTY)


class TestTreeProtocol(unittest.TestCase):
    """Test iteration, len, in and bool on non-empty trees."""

    def setUp(self):
        self.tree = from_iterable([3, 7, 1, 5, 2, 6, 4])

    def test_iter_is_in_order(self):
        self.assertEqual(list(self.tree), [1, 2, 3, 4, 5, 6, 7])

    def test_len_counts_duplicates(self):
        self.assertEqual(len(self.tree), 7)
        self.assertEqual(len(self.tree.insert(4)), 8)

    def test_contains(self):
        self.assertIn(4, self.tree)
        self.assertIn(7, self.tree)
        self.assertNotIn(0, self.tree)
        self.assertNotIn(8, self.tree)

    def test_bool(self):
        self.assertTrue(self.tree)

    def test_insert_method(self):
        """tree.insert(x) is insert(x, tree)."""
        bigger = self.tree.insert(0)
        self.assertEqual(list(bigger), [0, 1, 2, 3, 4, 5, 6, 7])
        self.assertEqual(list(self.tree), [1, 2, 3, 4, 5, 6, 7])

    def test_is_a_tree(self):
        self.assertIsInstance(self.tree, Tree)
        self.assertIsInstance(EMPTY, Tree)


class TestNodeImmutability(unittest.TestCase):
    """Test that published nodes cannot be changed."""

    def test_fields_are_frozen(self):
        node = insert(1, empty())
        with self.assertRaises(dataclasses.FrozenInstanceError):
            node.value = 2
        with self.assertRaises(dataclasses.FrozenInstanceError):
            node.left = insert(0, empty())

    def test_identity_equality(self):
        """Two trees with the same contents are still different objects."""
        a = from_iterable([1, 2])
        b = from_iterable([1, 2])
        self.assertNotEqual(a, b)
        self.assertEqual(list(a), list(b))
        self.assertEqual(len({a, b}), 2)

    def test_repr_omits_subtrees(self):
        tree = from_iterable([2, 1, 3])
        self.assertEqual(repr(tree), "Node(value=2)")

    def test_default_children_are_empty(self):
        node = Node(5)
        self.assertIs(node.left, EMPTY)
        self.assertIs(node.right, EMPTY)
        self.assertTrue(node.is_leaf())

    def test_pickle_round_trip_keeps_contents(self):
        tree = from_iterable([3, 1, 2])
        restored = pickle.loads(pickle.dumps(tree))
        self.assertEqual(list(restored), [1, 2, 3])
        self.assertIs(restored.left.left, EMPTY)


class TestInvalidArguments(unittest.TestCase):
    """Test handling of arguments that are not trees."""

    def test_insert_into_none(self):
        with self.assertRaises(TypeError):
            insert(1, None)

    def test_traverse_none(self):
        with self.assertRaises(TypeError):
            traverse(None)

    def test_insert_into_list(self):
        with self.assertRaises(TypeError):
            insert(1, [2, 3])


class TestShapeDependsOnOrder(unittest.TestCase):
    """Test that no rebalancing happens."""

    def test_sorted_input_is_a_chain(self):
        tree = from_iterable([1, 2, 3, 4])
        # Every node only has a right child
        current = tree
        for expected in [1, 2, 3, 4]:
            self.assertEqual(current.value, expected)
            self.assertIs(current.left, EMPTY)
            current = current.right
        self.assertIs(current, EMPTY)

    def test_reverse_sorted_input_is_a_left_chain(self):
        tree = from_iterable([4, 3, 2, 1])
        current = tree
        for expected in [4, 3, 2, 1]:
            self.assertEqual(current.value, expected)
            self.assertIs(current.right, EMPTY)
            current = current.left
        self.assertIs(current, EMPTY)


if __name__ == "__main__":
    unittest.main()
