"""Exception types for OrderedTreeLib.

All library errors derive from OrderedTreeError so callers can catch
everything the library raises with a single except clause.
"""

from typing import Any


class OrderedTreeError(Exception):
    """Base class for all OrderedTreeLib errors."""
    pass


class IncomparableValues(OrderedTreeError, TypeError):
    """Raised when an item cannot be ordered relative to a value in the tree.

    This happens when the comparison itself raises TypeError (``1 < "a"``)
    or when the element type only has a partial order and neither
    ``item < existing``, ``existing < item`` nor ``item == existing`` holds
    (disjoint sets, float NaN).

    The tree passed to insert is never affected by this error.

    Attributes:
        item: The value that was being inserted
        existing: The value already in the tree it could not be related to
    """

    def __init__(self, item: Any, existing: Any):
        self.item = item
        self.existing = existing
        super().__init__(
            f"Cannot order {item!r} relative to existing value {existing!r}"
        )


class ConfigurationError(OrderedTreeError, ValueError):
    """Raised when a TraversalConfig fails validation."""
    pass
