"""Tree traversal strategies for OrderedTreeLib.

Traversers implement different algorithms for walking through a tree.
All of them keep an explicit stack or queue instead of recursing, so a
degenerate tree (sorted insertion order) deeper than Python's recursion
limit is walked like any other.
"""

from abc import ABC, abstractmethod
from collections import deque
from typing import Deque, Iterator, List, Optional, Tuple

from .adapter import TreeAdapter
from .tree import EMPTY, Node, Tree


class TreeTraverser(ABC):
    """Abstract base class for tree traversal strategies.

    Traversers implement the algorithms for walking through trees in
    different orders (in-order, pre-order, breadth-first, etc.). They
    reach children through the TreeAdapter.
    """

    def __init__(self, adapter: TreeAdapter):
        """Initialize traverser with an adapter.

        Args:
            adapter: TreeAdapter for navigating the tree
        """
        self.adapter = adapter

    @abstractmethod
    def traverse(self,
                 root: Tree,
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[Node, int]]:
        """Traverse the tree starting from root.

        Args:
            root: Starting tree for traversal; EMPTY yields nothing
            max_depth: Maximum depth to traverse (None = unlimited)
            min_depth: Minimum depth before yielding nodes

        Yields:
            Tuples of (node, depth) where depth is relative to root
        """
        pass

    def _should_yield(self, depth: int, min_depth: int, max_depth: Optional[int]) -> bool:
        """Check if a node at given depth should be yielded."""
        if depth < min_depth:
            return False
        if max_depth is not None and depth > max_depth:
            return False
        return True

    def _should_explore(self, depth: int, max_depth: Optional[int]) -> bool:
        """Check if children of node at given depth should be explored."""
        if max_depth is None:
            return True
        return depth < max_depth


class InOrderTraverser(TreeTraverser):
    """In-order traversal: left subtree, node, right subtree.

    On an ordered tree this visits values in ascending order, or in
    descending order with reverse=True. Depth limits prune what is
    visited but never reorder it.
    """

    def __init__(self, adapter: TreeAdapter, reverse: bool = False):
        super().__init__(adapter)
        self.reverse = reverse

    def traverse(self,
                 root: Tree,
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[Node, int]]:
        stack: List[Tuple[Node, int]] = []
        current, depth = root, 0

        while stack or isinstance(current, Node):
            # Descend along the near side, remembering each node
            if isinstance(current, Node):
                stack.append((current, depth))
                if self._should_explore(depth, max_depth):
                    current, depth = self._near(current), depth + 1
                else:
                    current = EMPTY
                continue

            node, depth = stack.pop()
            if self._should_yield(depth, min_depth, max_depth):
                yield (node, depth)

            if self._should_explore(depth, max_depth):
                current, depth = self._far(node), depth + 1
            else:
                current = EMPTY

    def _near(self, node: Node) -> Tree:
        return node.right if self.reverse else node.left

    def _far(self, node: Node) -> Tree:
        return node.left if self.reverse else node.right


class PreOrderTraverser(TreeTraverser):
    """Depth-first pre-order traversal strategy.

    Visits parent before children. The sequence of values is exactly
    the sequence of inserts that rebuilds the same tree shape.
    """

    def traverse(self,
                 root: Tree,
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[Node, int]]:
        if not isinstance(root, Node):
            return
        stack: List[Tuple[Node, int]] = [(root, 0)]

        while stack:
            node, depth = stack.pop()

            if self._should_yield(depth, min_depth, max_depth):
                yield (node, depth)

            if self._should_explore(depth, max_depth) and not node.is_leaf():
                # Push right first so left is visited first
                children = list(self.adapter.get_children(node))
                for child in reversed(children):
                    stack.append((child, depth + 1))


class PostOrderTraverser(TreeTraverser):
    """Depth-first post-order traversal strategy.

    Visits children before parent. Good for computing aggregate values
    (like subtree sizes or heights) bottom-up.
    """

    def traverse(self,
                 root: Tree,
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[Node, int]]:
        if not isinstance(root, Node):
            return
        # Third element marks whether the node's children are already queued
        stack: List[Tuple[Node, int, bool]] = [(root, 0, False)]

        while stack:
            node, depth, expanded = stack.pop()

            if expanded:
                if self._should_yield(depth, min_depth, max_depth):
                    yield (node, depth)
                continue

            stack.append((node, depth, True))
            if self._should_explore(depth, max_depth) and not node.is_leaf():
                children = list(self.adapter.get_children(node))
                for child in reversed(children):
                    stack.append((child, depth + 1, False))


class BreadthFirstTraverser(TreeTraverser):
    """Breadth-first traversal strategy.

    Visits all nodes at depth N before visiting nodes at depth N+1.
    """

    def traverse(self,
                 root: Tree,
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[Node, int]]:
        if not isinstance(root, Node):
            return
        queue: Deque[Tuple[Node, int]] = deque([(root, 0)])

        while queue:
            node, depth = queue.popleft()

            if self._should_yield(depth, min_depth, max_depth):
                yield (node, depth)

            if self._should_explore(depth, max_depth) and not node.is_leaf():
                for child in self.adapter.get_children(node):
                    queue.append((child, depth + 1))


class LevelOrderTraverser(TreeTraverser):
    """Level-order traversal with level grouping.

    Similar to breadth-first but completes each level before building
    the next one. Useful when all nodes at a depth are processed together.
    """

    def traverse(self,
                 root: Tree,
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[Node, int]]:
        current_level: List[Node] = [root] if isinstance(root, Node) else []
        current_depth = 0

        while current_level and (max_depth is None or current_depth <= max_depth):
            next_level: List[Node] = []

            for node in current_level:
                if self._should_yield(current_depth, min_depth, max_depth):
                    yield (node, current_depth)

                if self._should_explore(current_depth, max_depth) and not node.is_leaf():
                    next_level.extend(self.adapter.get_children(node))

            current_level = next_level
            current_depth += 1


def create_traverser(strategy: str, adapter: TreeAdapter) -> TreeTraverser:
    """Create a traverser instance by strategy name.

    Args:
        strategy: Name of traversal strategy (in, pre, post, bfs, level)
        adapter: TreeAdapter for the tree

    Returns:
        TreeTraverser instance

    Raises:
        ValueError: If strategy name is not recognized
    """
    strategies = {
        'in': InOrderTraverser,
        'in_order': InOrderTraverser,
        'pre': PreOrderTraverser,
        'pre_order': PreOrderTraverser,
        'post': PostOrderTraverser,
        'post_order': PostOrderTraverser,
        'bfs': BreadthFirstTraverser,
        'breadth_first': BreadthFirstTraverser,
        'level': LevelOrderTraverser,
        'level_order': LevelOrderTraverser,
    }

    strategy_lower = strategy.lower()
    if strategy_lower not in strategies:
        raise ValueError(
            f"Unknown traversal strategy: {strategy}. "
            f"Choose from: {', '.join(strategies.keys())}"
        )

    return strategies[strategy_lower](adapter)
