"""TreeAdapter abstraction for OrderedTreeLib.

The adapter provides navigation over tree nodes (children, parent, depth)
so traversers and collectors never need to know how a tree is laid out.
Nodes themselves only hold data; they have no parent pointers, so the
adapter is bound to a root and answers upward questions by searching
down from it.
"""

from abc import ABC, abstractmethod
from typing import Iterator, List, Optional, Tuple

from .tree import Node, Tree

LEFT = "L"
RIGHT = "R"


class TreeAdapter(ABC):
    """Abstract adapter for navigating a tree of Nodes.

    Subclasses must provide get_children and get_parent. Depth and
    siblings have default implementations built on those two.
    """

    @abstractmethod
    def get_children(self, node: Node) -> Iterator[Node]:
        """Get an iterator of the non-empty children of node.

        Args:
            node: The parent node

        Returns:
            Iterator yielding child nodes, left before right
        """
        pass

    @abstractmethod
    def get_parent(self, node: Node) -> Optional[Node]:
        """Get the parent of node.

        Args:
            node: The child node

        Returns:
            Parent node or None if node is the root
        """
        pass

    def get_depth(self, node: Node) -> int:
        """Calculate the depth of a node in the tree.

        Default implementation walks up to root.
        Adapters can override for more efficient implementations.

        Args:
            node: The node to get depth for

        Returns:
            Depth where root = 0
        """
        depth = 0
        current = node
        while True:
            parent = self.get_parent(current)
            if parent is None:
                break
            depth += 1
            current = parent
        return depth

    def get_siblings(self, node: Node) -> Iterator[Node]:
        """Get the sibling of node, if any (excluding the node itself).

        Args:
            node: The node to get siblings for

        Returns:
            Iterator yielding at most one sibling
        """
        parent = self.get_parent(node)
        if parent is None:
            return
        for child in self.get_children(parent):
            if child is not node:
                yield child

    def estimated_size(self, node: Node) -> Optional[int]:
        """Estimate the number of nodes in the subtree rooted at node.

        Return None if estimation is not possible.
        """
        return None


class OrderedTreeAdapter(TreeAdapter):
    """Adapter for the persistent ordered tree, bound to one root.

    Parent lookups retrace the insertion path from the root: a node is
    found by comparing its value against each node on the way down, with
    ties descending right exactly as insert() places them. Nodes are
    matched by identity, so duplicates are told apart.

    Example:
        >>> tree = from_iterable([2, 1, 3])
        >>> adapter = OrderedTreeAdapter(tree)
        >>> [n.value for n in adapter.get_children(tree)]
        [1, 3]
    """

    def __init__(self, root: Tree):
        """Initialize adapter with the root of the tree to navigate.

        Args:
            root: Root of the tree; may be EMPTY

        Raises:
            TypeError: If root is not a Tree
        """
        if not isinstance(root, Tree):
            raise TypeError(f"Expected a Tree, got {type(root).__name__}")
        self.root = root

    def get_children(self, node: Node) -> Iterator[Node]:
        """Yield left then right child, skipping empty subtrees."""
        if isinstance(node.left, Node):
            yield node.left
        if isinstance(node.right, Node):
            yield node.right

    def get_parent(self, node: Node) -> Optional[Node]:
        """Find the parent of node by searching from the root."""
        steps = self._search(node)
        if len(steps) < 2:
            return None
        return steps[-2][0]

    def get_depth(self, node: Node) -> int:
        """Depth in one search instead of one search per ancestor."""
        return len(self._search(node)) - 1

    def get_path(self, node: Node) -> Tuple[str, ...]:
        """Get the directions from the root down to node.

        Returns:
            Tuple of "L"/"R" steps; empty for the root itself
        """
        return tuple(direction for _, direction in self._search(node)[1:])

    def estimated_size(self, node: Node) -> Optional[int]:
        """Count the nodes in the subtree exactly."""
        count = 0
        stack: List[Node] = [node]
        while stack:
            current = stack.pop()
            count += 1
            stack.extend(self.get_children(current))
        return count

    def _search(self, node: Node) -> List[Tuple[Node, str]]:
        """Walk from the root to node.

        Returns:
            List of (node, direction taken to reach it); the root's
            direction is the empty string

        Raises:
            ValueError: If node is not part of this tree
        """
        steps: List[Tuple[Node, str]] = []
        current = self.root
        direction = ""
        while isinstance(current, Node):
            steps.append((current, direction))
            if current is node:
                return steps
            if node.value < current.value:
                current, direction = current.left, LEFT
            else:
                current, direction = current.right, RIGHT
        raise ValueError(f"{node!r} is not part of this tree")
