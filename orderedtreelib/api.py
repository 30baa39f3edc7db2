"""High-level API for OrderedTreeLib.

This module provides simple, functional interfaces for building and
reading trees. These functions wrap the object-oriented API (configs,
adapters, plans) for ease of use in simple cases.
"""

import warnings
from typing import Any, Callable, Dict, Iterable, Iterator, Optional, Tuple, TypeVar, Union

from .config import (
    DataRequirement,
    DepthConfig,
    FilterConfig,
    TraversalConfig,
    TraversalOrder,
)
from .core.adapter import OrderedTreeAdapter
from .core.errors import IncomparableValues
from .core.traverser import BreadthFirstTraverser
from .core.tree import Node, Tree, empty, find_node, insert, traverse
from .error_policies import ErrorPolicy
from .planning import ExecutionPlan

T = TypeVar("T")

__all__ = [
    'empty',
    'insert',
    'traverse',
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


def from_iterable(
    items: Iterable[T],
    tree: Optional[Tree[T]] = None,
    on_error: Optional[ErrorPolicy] = None
) -> Tree[T]:
    """Build a tree by inserting items one at a time, in order.

    Args:
        items: Values to insert
        tree: Tree to insert into (default: empty tree). It is not modified.
        on_error: Policy consulted when an item cannot be ordered. Without
            one, the first IncomparableValues propagates.

    Returns:
        The resulting tree

    Example:
        >>> tree = from_iterable([3, 7, 1, 5, 2, 6, 4])
        >>> list(traverse(tree))
        [1, 2, 3, 4, 5, 6, 7]
    """
    result = empty() if tree is None else tree
    for item in items:
        try:
            result = insert(item, result)
        except IncomparableValues as error:
            if on_error is None:
                raise
            on_error.handle(error, item)
    return result


def traverse_tree(
    tree: Tree[T],
    order: Union[TraversalOrder, str] = TraversalOrder.IN_ORDER,
    max_depth: Optional[int] = None,
    min_depth: int = 0,
    include_filter: Optional[Callable[[T], bool]] = None,
    exclude_filter: Optional[Callable[[T], bool]] = None,
    reverse: bool = False,
    limit: Optional[int] = None,
    **kwargs
) -> Iterator[T]:
    """Yield the values of a tree in the requested order.

    With the defaults this yields the same sequence as traverse().

    Args:
        tree: Tree to walk
        order: Traversal order (in, pre, post, bfs, level)
        max_depth: Maximum depth to visit (root = 0)
        min_depth: Minimum depth before yielding values
        include_filter: Predicate a value must satisfy to be yielded
        exclude_filter: Predicate that drops a value when true
        reverse: Descending order (in-order only)
        limit: Stop after this many values

    Yields:
        Values matching the criteria

    Raises:
        ConfigurationError: If the options are inconsistent (on first use)

    Example:
        >>> tree = from_iterable([3, 1, 2])
        >>> list(traverse_tree(tree, order="pre"))
        [3, 1, 2]
    """
    if 'strategy' in kwargs:
        warnings.warn(
            "traverse_tree(strategy=...) is deprecated, use order=... instead",
            DeprecationWarning,
            stacklevel=2
        )
        order = kwargs.pop('strategy')
    if kwargs:
        raise TypeError(f"Unexpected keyword arguments: {', '.join(sorted(kwargs))}")

    config = TraversalConfig(
        order=_parse_order(order),
        reverse=reverse,
        depth=DepthConfig(
            min_depth=min_depth,
            max_depth=max_depth
        ),
        filter=FilterConfig(
            include_filter=include_filter,
            exclude_filter=exclude_filter
        ),
        data_requirements=DataRequirement.VALUE,
        limit=limit
    )

    plan = ExecutionPlan(config, OrderedTreeAdapter(tree))
    for _, value in plan.execute():
        yield value


def collect_tree_data(
    tree: Tree[T],
    data_requirement: DataRequirement = DataRequirement.VALUE_AND_DEPTH,
    **kwargs
) -> Iterator[Tuple[T, Any]]:
    """Walk a tree and collect the specified data for each value.

    Args:
        tree: Tree to walk
        data_requirement: What to collect for each node
        **kwargs: Traversal options (see traverse_tree), plus
            custom_collector when data_requirement is CUSTOM

    Yields:
        Tuples of (value, collected_data)

    Example:
        >>> tree = from_iterable([2, 1, 3])
        >>> list(collect_tree_data(tree, DataRequirement.PATH))
        [(1, ('L',)), (2, ()), (3, ('R',))]
    """
    config_kwargs = kwargs.copy()
    config_kwargs['data_requirement'] = data_requirement
    config = _build_config_from_kwargs(**config_kwargs)

    plan = ExecutionPlan(config, OrderedTreeAdapter(tree))
    for node, data in plan.execute():
        yield (node.value, data)


def count_values(tree: Tree[T], **kwargs) -> int:
    """Count the values in a tree that match criteria.

    Args:
        tree: Tree to walk
        **kwargs: Traversal options (see traverse_tree)

    Returns:
        Number of matching values, duplicates included
    """
    count = 0
    for _ in traverse_tree(tree, **kwargs):
        count += 1
    return count


def find_values(
    tree: Tree[T],
    predicate: Callable[[T], bool],
    **kwargs
) -> Iterator[T]:
    """Find values that match a predicate.

    This visits every node. For membership of a single value use
    contains(), which only follows one search path.

    Args:
        tree: Tree to walk
        predicate: Function that returns True for matching values
        **kwargs: Traversal options (see traverse_tree)

    Yields:
        Matching values, in ascending order by default
    """
    kwargs['include_filter'] = predicate
    yield from traverse_tree(tree, **kwargs)


def contains(tree: Tree[T], item: Any) -> bool:
    """Check whether a value equal to item is in the tree.

    Raises:
        IncomparableValues: If item cannot be ordered against the tree's values
    """
    return find_node(tree, item) is not None


def height(tree: Tree[Any]) -> int:
    """Return the number of levels in a tree (EMPTY = 0, one node = 1).

    Without rebalancing, a tree built from sorted input has height equal
    to its size.
    """
    traverser = BreadthFirstTraverser(OrderedTreeAdapter(tree))
    deepest = -1
    for _, depth in traverser.traverse(tree):
        deepest = max(deepest, depth)
    return deepest + 1


def min_value(tree: Tree[T]) -> T:
    """Return the smallest value in a tree.

    Raises:
        ValueError: If the tree is empty
    """
    return _extreme(tree, leftmost=True)


def max_value(tree: Tree[T]) -> T:
    """Return the largest value in a tree.

    With duplicates of the maximum, the most recently inserted one is
    returned (they compare equal).

    Raises:
        ValueError: If the tree is empty
    """
    return _extreme(tree, leftmost=False)


def get_tree_stats(tree: Tree[Any]) -> Dict[str, Any]:
    """Get statistics about the shape of a tree.

    Args:
        tree: Tree to examine

    Returns:
        Dictionary with keys size, height, leaf_nodes, internal_nodes,
        levels (node count per depth) and is_degenerate (every level
        holds a single node, as after sorted insertion)

    Example:
        >>> stats = get_tree_stats(from_iterable([1, 2, 3]))
        >>> stats['height'], stats['is_degenerate']
        (3, True)
    """
    stats: Dict[str, Any] = {
        'size': 0,
        'height': 0,
        'leaf_nodes': 0,
        'levels': {}
    }

    adapter = OrderedTreeAdapter(tree)
    traverser = BreadthFirstTraverser(adapter)
    for node, depth in traverser.traverse(tree):
        stats['size'] += 1
        if node.is_leaf():
            stats['leaf_nodes'] += 1
        stats['height'] = max(stats['height'], depth + 1)
        stats['levels'][depth] = stats['levels'].get(depth, 0) + 1

    stats['internal_nodes'] = stats['size'] - stats['leaf_nodes']
    stats['is_degenerate'] = stats['size'] > 2 and stats['height'] == stats['size']

    return stats


# Helper functions

def _extreme(tree: Tree[T], leftmost: bool) -> T:
    if not isinstance(tree, Node):
        raise ValueError("Empty tree has no values")
    current = tree
    while True:
        child = current.left if leftmost else current.right
        if not isinstance(child, Node):
            return current.value
        current = child


def _parse_order(order: Union[TraversalOrder, str]) -> TraversalOrder:
    """Parse traversal order from string or enum.

    Args:
        order: Order as enum or string

    Returns:
        TraversalOrder enum value
    """
    if isinstance(order, TraversalOrder):
        return order

    order_map = {
        'in': TraversalOrder.IN_ORDER,
        'in_order': TraversalOrder.IN_ORDER,
        'sorted': TraversalOrder.IN_ORDER,
        'pre': TraversalOrder.PRE_ORDER,
        'pre_order': TraversalOrder.PRE_ORDER,
        'post': TraversalOrder.POST_ORDER,
        'post_order': TraversalOrder.POST_ORDER,
        'bfs': TraversalOrder.BREADTH_FIRST,
        'breadth_first': TraversalOrder.BREADTH_FIRST,
        'level': TraversalOrder.LEVEL_ORDER,
        'level_order': TraversalOrder.LEVEL_ORDER,
    }

    order_lower = order.lower() if isinstance(order, str) else str(order)
    if order_lower in order_map:
        return order_map[order_lower]

    raise ValueError(f"Unknown traversal order: {order}")


def _build_config_from_kwargs(**kwargs) -> TraversalConfig:
    """Build TraversalConfig from keyword arguments.

    Args:
        **kwargs: Configuration options

    Returns:
        TraversalConfig instance

    Raises:
        TypeError: If an option is not recognized
    """
    config = TraversalConfig()

    if 'order' in kwargs:
        config.order = _parse_order(kwargs.pop('order'))

    if 'max_depth' in kwargs:
        config.depth.max_depth = kwargs.pop('max_depth')

    if 'min_depth' in kwargs:
        config.depth.min_depth = kwargs.pop('min_depth')

    if 'include_filter' in kwargs:
        config.filter.include_filter = kwargs.pop('include_filter')

    if 'exclude_filter' in kwargs:
        config.filter.exclude_filter = kwargs.pop('exclude_filter')

    if 'data_requirement' in kwargs:
        config.data_requirements = kwargs.pop('data_requirement')

    for key in ('reverse', 'limit', 'custom_traverser', 'custom_collector'):
        if key in kwargs:
            setattr(config, key, kwargs.pop(key))

    if kwargs:
        raise TypeError(f"Unexpected keyword arguments: {', '.join(sorted(kwargs))}")

    return config
