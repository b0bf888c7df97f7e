"""
Data models for the order-statistics containers.
"""

from ordstat.models.exceptions import TreapInvariantError
from ordstat.models.node import Node, node_size, recompute
from ordstat.models.ordering import Comparator, by_key, natural_order, reverse_order
from ordstat.models.priorities import RandomPriorities, SequencePriorities

__all__ = [
    "Comparator",
    "Node",
    "RandomPriorities",
    "SequencePriorities",
    "TreapInvariantError",
    "by_key",
    "natural_order",
    "node_size",
    "recompute",
    "reverse_order",
]
