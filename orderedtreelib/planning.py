"""Execution planning for OrderedTreeLib.

The ExecutionPlan validates a TraversalConfig, picks the traverser and
collector it calls for, and runs the walk.
"""

from typing import Any, Dict, Iterator, Optional, Tuple

from .config import DataRequirement, TraversalConfig, TraversalOrder
from .core.adapter import OrderedTreeAdapter
from .core.collector import (
    CustomCollector,
    DataCollector,
    DepthCollector,
    NodeCollector,
    PathCollector,
    ValueCollector,
)
from .core.errors import ConfigurationError
from .core.traverser import InOrderTraverser, TreeTraverser, create_traverser
from .core.tree import Node, Tree


class ExecutionPlan:
    """Validated execution plan for a tree walk.

    The plan is the bridge between user intent (TraversalConfig) and
    execution. Every problem with the configuration is reported up
    front, before any node is visited.
    """

    def __init__(self, config: TraversalConfig, adapter: OrderedTreeAdapter):
        """Create and validate an execution plan.

        Args:
            config: User's traversal configuration
            adapter: Adapter bound to the tree to walk

        Raises:
            ConfigurationError: If the configuration is invalid
        """
        self.config = config
        self.adapter = adapter

        config_errors = config.validate()
        if config_errors:
            raise ConfigurationError(
                f"Invalid configuration: {'; '.join(config_errors)}"
            )

        self.traverser = self._select_traverser()
        self.collector = self._select_collector()

        self.values_processed = 0

    def _select_traverser(self) -> TreeTraverser:
        if self.config.order == TraversalOrder.CUSTOM:
            return self.config.custom_traverser

        if self.config.order == TraversalOrder.IN_ORDER:
            return InOrderTraverser(self.adapter, reverse=self.config.reverse)

        return create_traverser(self.config.order.value, self.adapter)

    def _select_collector(self) -> DataCollector:
        if self.config.data_requirements == DataRequirement.CUSTOM:
            collector = self.config.custom_collector
            if callable(collector) and not isinstance(collector, DataCollector):
                return CustomCollector(self.adapter, collector)
            return collector

        collector_map = {
            DataRequirement.VALUE: ValueCollector,
            DataRequirement.VALUE_AND_DEPTH: DepthCollector,
            DataRequirement.NODE: NodeCollector,
            DataRequirement.PATH: PathCollector,
        }

        collector_class = collector_map[self.config.data_requirements]
        return collector_class(self.adapter)

    def execute(self, root: Optional[Tree] = None) -> Iterator[Tuple[Node, Any]]:
        """Execute the plan.

        Args:
            root: Subtree to start from (defaults to the adapter's root)

        Yields:
            Tuples of (node, collected_data)
        """
        self.values_processed = 0
        if root is None:
            root = self.adapter.root

        limit = self.config.limit
        if limit == 0:
            return

        for node, depth in self.traverser.traverse(
            root,
            max_depth=self.config.depth.max_depth,
            min_depth=self.config.depth.min_depth
        ):
            if not self.config.depth.should_yield(depth):
                continue

            if not self.config.filter.should_include(node.value):
                continue

            data = self.collector.collect(node, depth)
            self.values_processed += 1
            yield (node, data)

            if limit is not None and self.values_processed >= limit:
                break

    def get_summary(self) -> Dict[str, Any]:
        """Get summary of execution plan.

        Returns:
            Dictionary with plan details
        """
        return {
            'order': self.config.order.value,
            'reverse': self.config.reverse,
            'data_requirements': self.config.data_requirements.value,
            'max_depth': self.config.depth.max_depth,
            'min_depth': self.config.depth.min_depth,
            'limit': self.config.limit,
            'adapter': self.adapter.__class__.__name__,
            'traverser': self.traverser.__class__.__name__,
            'collector': self.collector.__class__.__name__,
        }
