"""
Sorted container implementations with order statistics.
"""

from ordstat.models.sortedcontainers.treap import Treap, merge, split

__all__ = ["Treap", "merge", "split"]
