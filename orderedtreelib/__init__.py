"""OrderedTreeLib - Persistent Ordered Tree Library.

OrderedTreeLib provides an immutable binary search tree for any orderable
value type. Inserting returns a new tree and leaves the old one intact;
traversing yields the values in sorted order, duplicates included.

Quick start:
━━━━━━━━━━━━━━━━━━━━━━━━━━
    from orderedtreelib import empty, insert, traverse

    tree = insert(2, insert(1, empty()))
    list(traverse(tree))        # [1, 2]
━━━━━━━━━━━━━━━━━━━━━━━━━━

Other walk orders, depth windows, filters and shape statistics are
available through traverse_tree, collect_tree_data and get_tree_stats.
"""

__version__ = "0.1.0"

# Core
from .core.tree import Tree, Empty, Node, EMPTY, empty, insert, traverse
from .core.errors import OrderedTreeError, IncomparableValues, ConfigurationError
from .core.adapter import TreeAdapter, OrderedTreeAdapter
from .core.traverser import (
    TreeTraverser,
    InOrderTraverser,
    PreOrderTraverser,
    PostOrderTraverser,
    BreadthFirstTraverser,
    LevelOrderTraverser,
    create_traverser,
)
from .core.collector import (
    DataCollector,
    ValueCollector,
    DepthCollector,
    NodeCollector,
    PathCollector,
    CustomCollector,
)

# Configuration and planning
from .config import (
    TraversalConfig,
    TraversalOrder,
    DataRequirement,
    FilterConfig,
    DepthConfig,
)
from .planning import ExecutionPlan

# Error policies
from .error_policies import (
    ErrorPolicy,
    FailFastPolicy,
    ContinueOnErrorsPolicy,
    CollectErrorsPolicy,
    ThresholdPolicy,
)

# High-level API
from .api import (
    from_iterable,
    traverse_tree,
    collect_tree_data,
    count_values,
    find_values,
    contains,
    height,
    min_value,
    max_value,
    get_tree_stats,
)

__all__ = [
    '__version__',
    # Core
    'Tree',
    'Empty',
    'Node',
    'EMPTY',
    'empty',
    'insert',
    'traverse',
    'OrderedTreeError',
    'IncomparableValues',
    'ConfigurationError',
    'TreeAdapter',
    'OrderedTreeAdapter',
    'TreeTraverser',
    'InOrderTraverser',
    'PreOrderTraverser',
    'PostOrderTraverser',
    'BreadthFirstTraverser',
    'LevelOrderTraverser',
    'create_traverser',
    'DataCollector',
    'ValueCollector',
    'DepthCollector',
    'NodeCollector',
    'PathCollector',
    'CustomCollector',
    # Config
    'TraversalConfig',
    'TraversalOrder',
    'DataRequirement',
    'FilterConfig',
    'DepthConfig',
    'ExecutionPlan',
    # Error policies
    'ErrorPolicy',
    'FailFastPolicy',
    'ContinueOnErrorsPolicy',
    'CollectErrorsPolicy',
    'ThresholdPolicy',
    # API
    'from_iterable',
    'traverse_tree',
    'collect_tree_data',
    'count_values',
    'find_values',
    'contains',
    'height',
    'min_value',
    'max_value',
    'get_tree_stats',
]
