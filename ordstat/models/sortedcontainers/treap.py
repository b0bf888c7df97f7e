"""
Treap implementation for sorted, duplicate-free key storage with rank queries.

Balanced by random priorities: O(log N) expected per operation.
"""

import logging
from typing import Any

from ordstat.interfaces.ordered_set import OrderedSet
from ordstat.interfaces.priority_source import PrioritySource
from ordstat.models.exceptions import TreapInvariantError
from ordstat.models.node import Node, node_size, recompute
from ordstat.models.ordering import Comparator, natural_order
from ordstat.models.priorities import RandomPriorities

logger = logging.getLogger(__name__)


def split(
    node: Node | None, key: Any, less: Comparator, inclusive: bool = False
) -> tuple[Node | None, Node | None]:
    """
    Partition a treap around a pivot key.

    The input tree is consumed: its nodes are relinked into the two results.

    Args:
        node: Root of the treap to split.
        key: Pivot key. It does not have to be present.
        less: Strict ordering over keys.
        inclusive: If True, keys equivalent to the pivot go left.

    Returns:
        (left, right) where left holds keys < pivot (<= pivot when inclusive)
        and right holds the rest.
    """
    if node is None:
        return None, None

    if inclusive:
        goes_left = not less(key, node.key)
    else:
        goes_left = less(node.key, key)

    if goes_left:
        left, right = split(node.right, key, less, inclusive)
        node.right = left
        recompute(node)
        return node, right

    left, right = split(node.left, key, less, inclusive)
    node.left = right
    recompute(node)
    return left, node


def merge(left: Node | None, right: Node | None) -> Node | None:
    """
    Join two treaps whose key ranges are ordered.

    Every key in left must be less than every key in right; this is not
    checked. The root with the higher priority ends up on top. On equal
    priorities the right root wins.

    Args:
        left: Treap holding the smaller keys.
        right: Treap holding the larger keys.

    Returns:
        Root of the merged treap.
    """
    if left is None:
        return right
    if right is None:
        return left

    if left.priority > right.priority:
        left.right = merge(left.right, right)
        recompute(left)
        return left

    right.left = merge(left, right.left)
    recompute(right)
    return right


class Treap(OrderedSet):
    """
    Treap implementation of OrderedSet.

    Properties maintained:
    1. Keys are in binary-search-tree order under the comparator
    2. Priorities are in max-heap order (parent >= child)
    3. Each node caches the size of its subtree
    4. No two keys are equivalent

    Insert and erase are built only from split and merge. Queries never
    restructure the tree.
    """

    def __init__(
        self,
        comparator: Comparator | None = None,
        seed: int | None = None,
        priorities: PrioritySource | None = None,
    ) -> None:
        """
        Initialize an empty treap.

        Args:
            comparator: Strict less-than callable over keys (default: operator.lt).
            seed: Seed for the default priority generator. None uses system entropy.
            priorities: Custom priority source. Mutually exclusive with seed.
        """
        if comparator is None:
            comparator = natural_order
        if not callable(comparator):
            raise TypeError(
                f"comparator must be callable, got {type(comparator).__name__}"
            )

        if priorities is not None:
            if seed is not None:
                raise ValueError("seed and priorities cannot both be given")
            if not isinstance(priorities, PrioritySource):
                raise TypeError(
                    f"priorities must be a PrioritySource, got {type(priorities).__name__}"
                )
        else:
            priorities = RandomPriorities(seed)

        self._less: Comparator = comparator
        self._priorities: PrioritySource = priorities
        self._root: Node | None = None

        logger.debug(
            f"Created treap with {type(priorities).__name__}"
            f"{' (seeded)' if seed is not None else ''}"
        )

    def insert(self, key: Any) -> None:
        """Add key unless an equivalent key exists. O(log N) expected"""
        if self.contains(key):
            return

        # Allocate before restructuring so a failure leaves the tree untouched
        new_node = Node(key=key, priority=self._priorities.draw())

        left, right = split(self._root, key, self._less)
        self._root = merge(left, merge(new_node, right))

    def erase(self, key: Any) -> bool:
        """Remove the key equivalent to key. O(log N) expected"""
        if self._root is None:
            return False

        left, rest = split(self._root, key, self._less)
        equal, right = split(rest, key, self._less, inclusive=True)
        self._root = merge(left, right)
        return equal is not None

    def contains(self, key: Any) -> bool:
        return self._find_node(key) is not None

    def order_of_key(self, key: Any) -> int:
        """Count keys strictly less than key. O(log N) expected"""
        less_count = 0
        current = self._root

        while current is not None:
            if self._less(key, current.key):
                current = current.left
            elif self._less(current.key, key):
                less_count += node_size(current.left) + 1
                current = current.right
            else:
                less_count += node_size(current.left)
                break

        return less_count

    def find_kth(self, k: int) -> Any | None:
        """Return the k-th smallest key (0-based), or None. O(log N) expected"""
        if k < 0 or k >= self.size():
            return None

        current = self._root
        while current is not None:
            left_size = node_size(current.left)
            if k < left_size:
                current = current.left
            elif k > left_size:
                k -= left_size + 1
                current = current.right
            else:
                return current.key
        return None

    def size(self) -> int:
        return node_size(self._root)

    def empty(self) -> bool:
        return self._root is None

    def clear(self) -> None:
        dropped = self.size()
        self._root = None
        logger.debug(f"Cleared treap, dropped {dropped} nodes")

    def validate(self) -> None:
        """
        Check the order, heap and size invariants over the whole tree.

        Raises:
            TreapInvariantError: On the first violation found.
        """
        try:
            self._validate()
        except TreapInvariantError as e:
            logger.error(f"Treap validation failed: {e}")
            raise

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, key: Any) -> bool:
        return self.contains(key)

    def __bool__(self) -> bool:
        return not self.empty()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={self.size()})"

    def _find_node(self, key: Any) -> Node | None:
        """Find node by key."""
        current = self._root
        while current is not None:
            if self._less(key, current.key):
                current = current.left
            elif self._less(current.key, key):
                current = current.right
            else:
                return current
        return None

    def _validate(self) -> None:
        """Walk the tree with an explicit stack, carrying the open key bounds."""
        if self._root is None:
            return

        # Post-order: sizes of both children are checked before the parent
        stack: list[tuple[Node, Node | None, Node | None, bool]] = [
            (self._root, None, None, False)
        ]
        while stack:
            node, low, high, children_done = stack.pop()

            if children_done:
                expected = 1 + node_size(node.left) + node_size(node.right)
                if node.subtree_size != expected:
                    raise TreapInvariantError(
                        "size",
                        node.key,
                        f"cached size {node.subtree_size}, actual {expected}",
                    )
                continue

            if low is not None and not self._less(low.key, node.key):
                raise TreapInvariantError(
                    "order", node.key, f"not greater than ancestor {low.key!r}"
                )
            if high is not None and not self._less(node.key, high.key):
                raise TreapInvariantError(
                    "order", node.key, f"not less than ancestor {high.key!r}"
                )

            stack.append((node, low, high, True))
            for child, child_low, child_high in (
                (node.left, low, node),
                (node.right, node, high),
            ):
                if child is None:
                    continue
                if child.priority > node.priority:
                    raise TreapInvariantError(
                        "heap",
                        child.key,
                        f"priority {child.priority} above parent's {node.priority}",
                    )
                stack.append((child, child_low, child_high, False))
