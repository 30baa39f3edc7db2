"""Test fixtures for OrderedTreeLib consumers.

These helpers give test suites a stable way to look at tree shape and
check the ordering invariant without reaching into Node internals.
"""

from typing import Any, FrozenSet, Iterable, List, Optional, Tuple

from ..core.tree import Node, Tree


class TreeShapeHelper:
    """Public test fixture for inspecting a tree's shape.

    Example:
        tree = from_iterable([2, 1, 3])
        helper = TreeShapeHelper(tree)

        assert helper.shape() == (2, (1, None, None), (3, None, None))
        assert helper.check_invariant() == []
    """

    def __init__(self, tree: Tree):
        """Initialize with the tree to inspect.

        Args:
            tree: Tree to inspect; may be EMPTY
        """
        self._tree = tree

    def shape(self) -> Optional[Tuple[Any, Any, Any]]:
        """Returns the tree as nested (value, left, right) tuples.

        Empty subtrees are None. Intended for small trees in assertions;
        the result nests as deep as the tree does.
        """
        return self._shape(self._tree)

    def _shape(self, tree: Tree) -> Optional[Tuple[Any, Any, Any]]:
        if not isinstance(tree, Node):
            return None
        return (tree.value, self._shape(tree.left), self._shape(tree.right))

    def check_invariant(self) -> List[str]:
        """Checks the ordering invariant at every node.

        Each node is checked against the bounds inherited from its
        ancestors: strictly below the value of every ancestor it sits
        left of, and at or above every ancestor it sits right of.

        Returns:
            List of violation messages (empty if the tree is valid)
        """
        problems = []
        # (subtree, lower bound inclusive, upper bound exclusive)
        stack: List[Tuple[Tree, Optional[Node], Optional[Node]]] = [(self._tree, None, None)]
        while stack:
            tree, low, high = stack.pop()
            if not isinstance(tree, Node):
                continue
            if low is not None and tree.value < low.value:
                problems.append(
                    f"{tree.value!r} is in the right subtree of {low.value!r} but smaller"
                )
            if high is not None and not tree.value < high.value:
                problems.append(
                    f"{tree.value!r} is in the left subtree of {high.value!r} but not smaller"
                )
            stack.append((tree.left, low, tree))
            stack.append((tree.right, tree, high))
        return problems

    def height(self) -> int:
        """Returns the number of levels (EMPTY = 0)."""
        deepest = 0
        stack: List[Tuple[Tree, int]] = [(self._tree, 1)]
        while stack:
            tree, level = stack.pop()
            if isinstance(tree, Node):
                deepest = max(deepest, level)
                stack.append((tree.left, level + 1))
                stack.append((tree.right, level + 1))
        return deepest

    def depth_of(self, value: Any) -> Optional[int]:
        """Returns the depth of the shallowest node holding value.

        Args:
            value: Value to look for

        Returns:
            Depth (root = 0) or None if the value is not present
        """
        depth = 0
        current = self._tree
        while isinstance(current, Node):
            if value < current.value:
                current = current.left
            elif value == current.value:
                return depth
            else:
                current = current.right
            depth += 1
        return None

    def nodes(self) -> List[Node]:
        """Returns every node, pre-order."""
        found = []
        stack: List[Tree] = [self._tree]
        while stack:
            tree = stack.pop()
            if isinstance(tree, Node):
                found.append(tree)
                stack.append(tree.right)
                stack.append(tree.left)
        return found


class PartialOrderValue:
    """A value type whose order is only partial, for exercising error paths.

    Values are sets of members ordered by inclusion: ``a < b`` when a is
    a proper subset of b. Two values with neither containing the other
    (``{1}`` and ``{2}``) are incomparable, which makes insert raise
    IncomparableValues.

    Example:
        low = PartialOrderValue([1])
        high = PartialOrderValue([1, 2])
        other = PartialOrderValue([3])

        assert low < high
        assert not (low < other) and not (other < low) and low != other
    """

    __slots__ = ("members",)

    def __init__(self, members: Iterable[Any]):
        self.members: FrozenSet[Any] = frozenset(members)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, PartialOrderValue):
            return NotImplemented
        return self.members < other.members

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PartialOrderValue):
            return NotImplemented
        return self.members == other.members

    def __hash__(self) -> int:
        return hash(self.members)

    def __repr__(self) -> str:
        return f"PartialOrderValue({sorted(self.members, key=repr)!r})"
