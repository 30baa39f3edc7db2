"""Configuration system for OrderedTreeLib.

This module defines how users specify what they want out of a tree walk:
the order values come out in, what is collected for each node, which
depths and values to keep, and how many results to produce.

Configuration only shapes reading. Nothing here affects how values are
inserted or how a tree is shaped.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, List, Optional


class TraversalOrder(Enum):
    """Order in which nodes are visited."""
    IN_ORDER = "in"             # Ascending values (descending with reverse)
    PRE_ORDER = "pre"           # Parent before children
    POST_ORDER = "post"         # Children before parent
    BREADTH_FIRST = "bfs"       # Level by level
    LEVEL_ORDER = "level"       # Grouped by level
    CUSTOM = "custom"           # User-defined traverser


class DataRequirement(Enum):
    """Specifies what data is collected for each visited node."""
    VALUE = "value"                       # Just the stored value
    VALUE_AND_DEPTH = "value_and_depth"   # (value, depth) pairs
    NODE = "node"                         # Node objects
    PATH = "path"                         # "L"/"R" steps from the root
    CUSTOM = "custom"                     # User-defined collection


@dataclass
class FilterConfig:
    """Configuration for filtering values during traversal.

    Filters only decide what is yielded; subtrees below an excluded
    value are still visited.
    """

    include_filter: Optional[Callable[[Any], bool]] = None  # Include predicate
    exclude_filter: Optional[Callable[[Any], bool]] = None  # Exclude predicate

    def should_include(self, value: Any) -> bool:
        """Check if a value should be included based on filters.

        Args:
            value: Value to check

        Returns:
            True if value passes all filters
        """
        # Exclusion takes precedence
        if self.exclude_filter and self.exclude_filter(value):
            return False

        if self.include_filter:
            return self.include_filter(value)

        return True


@dataclass
class DepthConfig:
    """Configuration for depth-based filtering."""

    min_depth: int = 0                 # Minimum depth to yield
    max_depth: Optional[int] = None    # Maximum depth to traverse

    def should_yield(self, depth: int) -> bool:
        """Check if nodes at this depth should be yielded."""
        if depth < self.min_depth:
            return False
        if self.max_depth is not None and depth > self.max_depth:
            return False
        return True

    def should_explore(self, depth: int) -> bool:
        """Check if children at this depth should be explored."""
        if self.max_depth is not None:
            return depth < self.max_depth
        return True


@dataclass
class TraversalConfig:
    """Complete configuration for a tree walk.

    The ExecutionPlan validates this configuration and turns it into a
    traverser and collector.
    """

    # Traversal algorithm
    order: TraversalOrder = TraversalOrder.IN_ORDER
    custom_traverser: Optional[Any] = None  # Custom TreeTraverser instance
    reverse: bool = False                   # Descending, in-order only

    # Depth control
    depth: DepthConfig = field(default_factory=DepthConfig)

    # Value filtering
    filter: FilterConfig = field(default_factory=FilterConfig)

    # Data collection
    data_requirements: DataRequirement = DataRequirement.VALUE
    custom_collector: Optional[Any] = None  # Custom DataCollector instance

    # Stop after this many results
    limit: Optional[int] = None

    @classmethod
    def sorted_values(cls, reverse: bool = False) -> 'TraversalConfig':
        """Create config yielding every value in sorted order.

        Args:
            reverse: Yield largest first

        Returns:
            TraversalConfig for a sorted dump
        """
        return cls(
            order=TraversalOrder.IN_ORDER,
            reverse=reverse,
            data_requirements=DataRequirement.VALUE,
        )

    @classmethod
    def shape_dump(cls) -> 'TraversalConfig':
        """Create config describing the tree shape.

        Pre-order (value, depth) pairs: enough to draw the tree, and
        inserting the values in this order rebuilds the same shape.
        """
        return cls(
            order=TraversalOrder.PRE_ORDER,
            data_requirements=DataRequirement.VALUE_AND_DEPTH,
        )

    @classmethod
    def top_levels(cls, max_depth: int = 1) -> 'TraversalConfig':
        """Create config for the nodes near the root.

        Args:
            max_depth: Deepest level to include (0 = root only)

        Returns:
            TraversalConfig visiting levels 0..max_depth breadth-first
        """
        return cls(
            order=TraversalOrder.BREADTH_FIRST,
            depth=DepthConfig(max_depth=max_depth),
            data_requirements=DataRequirement.VALUE_AND_DEPTH,
        )

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if self.depth.min_depth < 0:
            errors.append("min_depth cannot be negative")

        if self.depth.max_depth is not None:
            if self.depth.max_depth < 0:
                errors.append("max_depth cannot be negative")
            if self.depth.max_depth < self.depth.min_depth:
                errors.append("max_depth cannot be less than min_depth")

        if self.limit is not None and self.limit < 0:
            errors.append("limit cannot be negative")

        if self.reverse and self.order != TraversalOrder.IN_ORDER:
            errors.append("reverse is only supported for in-order traversal")

        if self.order == TraversalOrder.CUSTOM and self.custom_traverser is None:
            errors.append("custom_traverser required when order is CUSTOM")

        if self.data_requirements == DataRequirement.CUSTOM and self.custom_collector is None:
            errors.append("custom_collector required when data_requirements is CUSTOM")

        return errors
