"""Core abstractions for OrderedTreeLib.

This package contains the tree itself and the building blocks used to
walk it: adapters, traversers and collectors.
"""

from .errors import OrderedTreeError, IncomparableValues, ConfigurationError
from .tree import Tree, Empty, Node, EMPTY, empty, insert, traverse, find_node
from .adapter import TreeAdapter, OrderedTreeAdapter
from .traverser import (
    TreeTraverser,
    InOrderTraverser,
    PreOrderTraverser,
    PostOrderTraverser,
    BreadthFirstTraverser,
    LevelOrderTraverser,
    create_traverser,
)
from .collector import (
    DataCollector,
    ValueCollector,
    DepthCollector,
    NodeCollector,
    PathCollector,
    CustomCollector,
)

__all__ = [
    "OrderedTreeError",
    "IncomparableValues",
    "ConfigurationError",
    "Tree",
    "Empty",
    "Node",
    "EMPTY",
    "empty",
    "insert",
    "traverse",
    "find_node",
    "TreeAdapter",
    "OrderedTreeAdapter",
    "TreeTraverser",
    "InOrderTraverser",
    "PreOrderTraverser",
    "PostOrderTraverser",
    "BreadthFirstTraverser",
    "LevelOrderTraverser",
    "create_traverser",
    "DataCollector",
    "ValueCollector",
    "DepthCollector",
    "NodeCollector",
    "PathCollector",
    "CustomCollector",
]
