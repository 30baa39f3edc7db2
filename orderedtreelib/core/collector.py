"""Data collection strategies for OrderedTreeLib.

DataCollectors define what information to extract from nodes during
traversal, so the same walk can produce bare values, values with their
depth, the nodes themselves or their position in the tree.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, Tuple

from .adapter import OrderedTreeAdapter, TreeAdapter
from .tree import Node


class DataCollector(ABC):
    """Abstract base class for data collection strategies."""

    def __init__(self, adapter: TreeAdapter):
        """Initialize collector with an adapter.

        Args:
            adapter: TreeAdapter for additional node operations
        """
        self.adapter = adapter

    @abstractmethod
    def collect(self, node: Node, depth: int) -> Any:
        """Collect data from a node.

        Args:
            node: The node to collect data from
            depth: Current depth in traversal

        Returns:
            Collected data (type depends on collector)
        """
        pass


class ValueCollector(DataCollector):
    """Collects only the stored value."""

    def collect(self, node: Node, depth: int) -> Any:
        return node.value


class DepthCollector(DataCollector):
    """Collects (value, depth) pairs.

    Pre-order output of this collector is a readable dump of the tree shape.
    """

    def collect(self, node: Node, depth: int) -> Tuple[Any, int]:
        return (node.value, depth)


class NodeCollector(DataCollector):
    """Collects the Node objects themselves."""

    def collect(self, node: Node, depth: int) -> Node:
        return node


class PathCollector(DataCollector):
    """Collects the left/right directions from the root to each node.

    The root's path is the empty tuple. Paths are cached per node since
    each lookup searches from the root.
    """

    def __init__(self, adapter: TreeAdapter):
        if not isinstance(adapter, OrderedTreeAdapter):
            raise TypeError("PathCollector requires an OrderedTreeAdapter")
        super().__init__(adapter)
        self._path_cache: Dict[int, Tuple[str, ...]] = {}

    def collect(self, node: Node, depth: int) -> Tuple[str, ...]:
        key = id(node)
        if key not in self._path_cache:
            self._path_cache[key] = self.adapter.get_path(node)
        return self._path_cache[key]


class CustomCollector(DataCollector):
    """Collector that uses a user-provided function.

    Example:
        >>> collector = CustomCollector(adapter, lambda node, depth: node.value * 2)
    """

    def __init__(self, adapter: TreeAdapter, collect_func: Callable[[Node, int], Any]):
        """Initialize with custom collection function.

        Args:
            adapter: TreeAdapter for tree navigation
            collect_func: Function(node, depth) -> data
        """
        super().__init__(adapter)
        self.collect_func = collect_func

    def collect(self, node: Node, depth: int) -> Any:
        return self.collect_func(node, depth)
