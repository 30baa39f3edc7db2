"""The persistent ordered tree for OrderedTreeLib.

A Tree is either the shared EMPTY leaf or a Node holding a value and two
subtrees. Trees are never modified after construction: insert returns a
new tree that rebuilds only the nodes on the search path and shares the
rest with the input tree.

Every value in a node's left subtree is strictly less than the node's
value; every value in its right subtree is greater than or equal to it.
Equal values therefore go right and duplicates are kept.

There is no rebalancing. The shape of a tree is a direct function of the
order items were inserted in, so inserting sorted data produces a tree
whose height equals its size. Insert and traverse walk the tree with an
explicit stack, so such degenerate trees work at any size.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Generic, Iterator, List, Optional, Tuple, TypeVar

from .errors import IncomparableValues

T = TypeVar("T")


class Tree(ABC, Generic[T]):
    """Abstract base for the two tree variants, Empty and Node.

    Besides the module-level functions, a tree supports iteration (in-order),
    ``len()``, ``in`` and truthiness (an empty tree is falsy).
    """

    __slots__ = ()

    @abstractmethod
    def is_empty(self) -> bool:
        """Return True for the Empty variant."""
        pass

    @abstractmethod
    def is_leaf(self) -> bool:
        """Return True if this tree has no non-empty subtrees."""
        pass

    def insert(self, item: T) -> "Tree[T]":
        """Return a new tree with item added. See insert()."""
        return insert(item, self)

    def __iter__(self) -> Iterator[T]:
        return traverse(self)

    def __len__(self) -> int:
        count = 0
        for _ in traverse(self):
            count += 1
        return count

    def __contains__(self, item: object) -> bool:
        return find_node(self, item) is not None

    def __bool__(self) -> bool:
        return not self.is_empty()


class Empty(Tree[T]):
    """The empty tree. There is exactly one instance, EMPTY."""

    __slots__ = ()
    _instance: Optional["Empty"] = None

    def __new__(cls) -> "Empty":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def is_empty(self) -> bool:
        return True

    def is_leaf(self) -> bool:
        return True

    def __reduce__(self):
        return (Empty, ())

    def __repr__(self) -> str:
        return "Empty()"


EMPTY: Empty = Empty()


@dataclass(frozen=True, eq=False, repr=False)
class Node(Tree[T]):
    """A tree holding one value and two subtrees.

    Nodes compare and hash by identity. Use traverse() to compare the
    contents of two trees.
    """

    value: T
    left: Tree[T] = EMPTY
    right: Tree[T] = EMPTY

    def is_empty(self) -> bool:
        return False

    def is_leaf(self) -> bool:
        return self.left.is_empty() and self.right.is_empty()

    def __repr__(self) -> str:
        # Subtrees are left out so deep trees stay printable
        return f"Node(value={self.value!r})"


def empty() -> Tree[Any]:
    """Return the empty tree."""
    return EMPTY


def _goes_left(item: Any, value: Any) -> bool:
    """Decide which subtree of a node holding value receives item.

    Returns True for the left subtree (item < value) and False for the
    right one (value <= item).

    Raises:
        IncomparableValues: If the two values cannot be ordered
    """
    try:
        if item < value:
            return True
        if value < item or item == value:
            return False
    except TypeError as error:
        raise IncomparableValues(item, value) from error
    raise IncomparableValues(item, value)


def _check_tree(tree: Any) -> None:
    if not isinstance(tree, Tree):
        raise TypeError(f"Expected a Tree, got {type(tree).__name__}")


def insert(item: T, tree: Tree[T]) -> Tree[T]:
    """Return a new tree containing every value of tree plus item.

    The input tree is not modified and stays valid for anyone holding it.
    Items equal to an existing value are placed in its right subtree, so
    duplicates are preserved.

    Args:
        item: Value to insert
        tree: Tree to insert into

    Returns:
        A new tree; untouched subtrees are shared with the input

    Raises:
        IncomparableValues: If item cannot be ordered against a value on
            its search path. Nothing is built before this is raised.
        TypeError: If tree is not a Tree

    Example:
        >>> tree = insert(2, insert(1, empty()))
        >>> list(traverse(tree))
        [1, 2]
    """
    _check_tree(tree)

    # Find the insertion point first so a failed comparison builds nothing
    path: List[Tuple[Node, bool]] = []
    current = tree
    while isinstance(current, Node):
        went_left = _goes_left(item, current.value)
        path.append((current, went_left))
        current = current.left if went_left else current.right

    result: Tree[T] = Node(item, EMPTY, EMPTY)
    for node, went_left in reversed(path):
        if went_left:
            result = Node(node.value, result, node.right)
        else:
            result = Node(node.value, node.left, result)
    return result


def traverse(tree: Tree[T]) -> Iterator[T]:
    """Yield the values of tree in ascending order (in-order traversal).

    Each call returns a fresh iterator, so a tree can be traversed any
    number of times, by any number of readers, with identical results.

    Args:
        tree: Tree to traverse

    Yields:
        Values in non-decreasing order, duplicates included
    """
    _check_tree(tree)
    return _traverse(tree)


def _traverse(tree: Tree[T]) -> Iterator[T]:
    stack: List[Node] = []
    current = tree
    while stack or isinstance(current, Node):
        if isinstance(current, Node):
            stack.append(current)
            current = current.left
            continue
        node = stack.pop()
        yield node.value
        current = node.right


def find_node(tree: Tree[T], item: Any) -> Optional[Node]:
    """Return the first node on item's search path holding an equal value.

    Follows the same path insert() would take, so the search costs
    O(height) comparisons.

    Raises:
        IncomparableValues: If item cannot be ordered against a value on
            its search path
    """
    _check_tree(tree)
    current = tree
    while isinstance(current, Node):
        if _goes_left(item, current.value):
            current = current.left
        elif item == current.value:
            return current
        else:
            current = current.right
    return None
