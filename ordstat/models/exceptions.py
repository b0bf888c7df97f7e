"""
Custom exceptions for the order-statistics containers.
"""

from typing import Any


class TreapInvariantError(Exception):
    """
    Raised when a treap fails structural validation.

    This is a fail-fast error pointing at a corrupted tree, never at bad input.
    """

    def __init__(self, invariant: str, key: Any, detail: str):
        """
        Initialize invariant error.

        Args:
            invariant: Name of the broken invariant ("order", "heap" or "size").
            key: Key of the node where the violation was found.
            detail: Human readable description of the mismatch.
        """
        self.invariant = invariant
        self.key = key
        self.detail = detail
        super().__init__(
            f"treap {invariant} invariant violated at key {key!r}: {detail}"
        )
