"""
Treap node and subtree size bookkeeping.
"""

from dataclasses import dataclass
from typing import Any


@dataclass
class Node:
    """Node in the treap. Children are exclusively owned, no parent links."""

    key: Any
    priority: int
    left: "Node | None" = None
    right: "Node | None" = None
    subtree_size: int = 1


def node_size(node: Node | None) -> int:
    """Return the cached subtree size, 0 for an absent node."""
    return node.subtree_size if node is not None else 0


def recompute(node: Node) -> None:
    """Refresh node.subtree_size from its children. Call after every child change."""
    node.subtree_size = 1 + node_size(node.left) + node_size(node.right)
