"""
OrderedSet abstract base class for duplicate-free order-statistics containers.
"""

from abc import ABC, abstractmethod
from typing import Any


class OrderedSet(ABC):
    """
    Abstract base class for sorted, duplicate-free key containers.

    Besides membership, implementations answer rank (order_of_key) and
    select (find_kth) queries against the configured key ordering.

    Implementations:
    - Treap: randomized balancing, O(log N) expected per operation
    """

    @abstractmethod
    def insert(self, key: Any) -> None:
        """
        Add a key if no equivalent key is present.

        Args:
            key: The key to add.

        Time complexity: O(log N) expected
        """
        pass

    @abstractmethod
    def erase(self, key: Any) -> bool:
        """
        Remove the key equivalent to the given one.

        Args:
            key: The key to remove.

        Returns:
            True if a key was removed, False if none was present.

        Time complexity: O(log N) expected
        """
        pass

    @abstractmethod
    def contains(self, key: Any) -> bool:
        """
        Check if an equivalent key is present.

        Time complexity: O(log N) expected
        """
        pass

    @abstractmethod
    def order_of_key(self, key: Any) -> int:
        """
        Count the keys strictly less than the given key.

        Args:
            key: The key to rank. It does not have to be present.

        Returns:
            The 0-based rank, i.e. the position the key has or would have.

        Time complexity: O(log N) expected
        """
        pass

    @abstractmethod
    def find_kth(self, k: int) -> Any | None:
        """
        Return the k-th smallest key (0-based).

        Args:
            k: The sorted position to look up.

        Returns:
            The key, or None if k is outside [0, size()).

        Time complexity: O(log N) expected
        """
        pass

    @abstractmethod
    def size(self) -> int:
        """
        Return the number of keys.

        Time complexity: O(1)
        """
        pass

    @abstractmethod
    def empty(self) -> bool:
        """Return True if the container holds no keys. O(1)"""
        pass

    @abstractmethod
    def clear(self) -> None:
        """Remove every key. O(N)"""
        pass
