"""
PrioritySource protocol for the random priorities that balance a treap.
"""

from abc import ABC, abstractmethod


class PrioritySource(ABC):
    """
    Source of node priorities.

    Each call to draw() advances the source by exactly one step. Sources are
    owned by a single container and are never shared between instances.
    """

    @abstractmethod
    def draw(self) -> int:
        """
        Return the next priority.

        Returns:
            A non-negative integer priority.
        """
        pass
