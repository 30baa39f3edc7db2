"""
Error handling policies for OrderedTreeLib.

Building a tree from many items can run into values that cannot be
ordered against what is already in the tree. These policies decide what
from_iterable() does when that happens: stop, skip and report, or skip
up to a limit.

insert() itself never consults a policy; a failed insert always raises.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List
import sys


class ErrorPolicy(ABC):
    """
    Base class for error handling policies.

    handle() is called from inside the except block for the failed
    insert. Raising aborts the build; returning skips the item.
    """

    @abstractmethod
    def handle(self, error: Exception, item: Any) -> None:
        """
        Handle an error raised while inserting item.

        Args:
            error: The exception that was raised
            item: The item that could not be inserted
        """
        pass


class FailFastPolicy(ErrorPolicy):
    """
    Policy that stops the build on the first error.

    This is what from_iterable() does when no policy is given.
    """

    def handle(self, error: Exception, item: Any) -> None:
        """Re-raise the error immediately."""
        raise error


def _record(error: Exception, item: Any) -> Dict[str, Any]:
    return {
        'item': item,
        'existing': getattr(error, 'existing', None),
        'error': error,
        'error_type': type(error).__name__,
        'error_message': str(error)
    }


class ContinueOnErrorsPolicy(ErrorPolicy):
    """
    Policy that reports errors and keeps building.

    Failed items are left out of the tree and recorded for later
    inspection.
    """

    def __init__(self, verbose: bool = True):
        """
        Initialize the policy.

        Args:
            verbose: If True, print warnings to stderr when errors occur
        """
        self.errors: List[Dict[str, Any]] = []
        self.skipped_items: List[Any] = []
        self.verbose = verbose

    def handle(self, error: Exception, item: Any) -> None:
        """Record the error and skip the item."""
        self.errors.append(_record(error, item))
        self.skipped_items.append(item)

        if self.verbose:
            print(f"\nWARNING: Skipping {item!r}: {error}", file=sys.stderr)

    def get_statistics(self) -> dict:
        """
        Get statistics about errors encountered.

        Returns:
            Dictionary with error counts and details
        """
        return {
            'total_errors': len(self.errors),
            'skipped_items': len(self.skipped_items),
            'error_types': sorted({e['error_type'] for e in self.errors}),
            'errors': self.errors  # Full error details
        }


class CollectErrorsPolicy(ErrorPolicy):
    """
    Policy that collects all errors without printing, for batch processing.

    Similar to ContinueOnErrorsPolicy but silent. Useful for collecting
    all errors and presenting them at the end.
    """

    def __init__(self):
        self.errors: List[Dict[str, Any]] = []

    def handle(self, error: Exception, item: Any) -> None:
        """Silently collect the error and skip the item."""
        self.errors.append(_record(error, item))

    def has_errors(self) -> bool:
        return bool(self.errors)

    def get_errors(self) -> List[Dict[str, Any]]:
        return list(self.errors)

    def clear(self) -> None:
        self.errors.clear()


class ThresholdPolicy(ErrorPolicy):
    """
    Policy that tolerates errors up to a threshold, then fails.

    Useful when a few unorderable items are expected but many of them
    mean the input is the wrong kind of data altogether.
    """

    def __init__(self, max_errors: int = 10, verbose: bool = True):
        """
        Initialize threshold policy.

        Args:
            max_errors: Maximum errors to tolerate before failing
            verbose: If True, print warnings for errors
        """
        self.max_errors = max_errors
        self.error_count = 0
        self.verbose = verbose
        self.errors: List[Exception] = []

    def handle(self, error: Exception, item: Any) -> None:
        """Skip the item if under threshold, otherwise raise."""
        self.error_count += 1
        self.errors.append(error)

        if self.error_count > self.max_errors:
            raise RuntimeError(f"Error threshold exceeded ({self.max_errors} errors)") from error

        if self.verbose:
            print(f"\nWARNING [{self.error_count}/{self.max_errors}]: Skipping {item!r}: {error}",
                  file=sys.stderr)
