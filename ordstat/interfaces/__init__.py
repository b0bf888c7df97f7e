"""
Abstract base classes for the order-statistics containers.
"""

from ordstat.interfaces.ordered_set import OrderedSet
from ordstat.interfaces.priority_source import PrioritySource

__all__ = ["OrderedSet", "PrioritySource"]
