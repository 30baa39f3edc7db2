"""Testing utilities for OrderedTreeLib consumers."""

from .fixtures import PartialOrderValue, TreeShapeHelper

__all__ = ['PartialOrderValue', 'TreeShapeHelper']
