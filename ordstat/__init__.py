"""
Order-statistics sorted set backed by a randomized treap.

This package provides a duplicate-free sorted container with:
- insert(key) / erase(key) - O(log N) expected, via split and merge
- contains(key) - membership under a configurable ordering
- order_of_key(key) - rank: number of keys strictly less than key
- find_kth(k) - select: the k-th smallest key, or None
- size() / empty() / clear()
"""

from ordstat.interfaces import OrderedSet, PrioritySource
from ordstat.models import (
    RandomPriorities,
    SequencePriorities,
    TreapInvariantError,
    by_key,
    natural_order,
    reverse_order,
)
from ordstat.models.sortedcontainers import Treap

__all__ = [
    "OrderedSet",
    "PrioritySource",
    "RandomPriorities",
    "SequencePriorities",
    "Treap",
    "TreapInvariantError",
    "by_key",
    "natural_order",
    "reverse_order",
]
