"""
Key orderings. An ordering is a strict "less-than" callable (a, b) -> bool.
"""

import operator
from collections.abc import Callable
from typing import Any

Comparator = Callable[[Any, Any], bool]

# Ascending order using the keys' own __lt__
natural_order: Comparator = operator.lt

# Descending order using the keys' own __gt__
reverse_order: Comparator = operator.gt


def by_key(func: Callable[[Any], Any], less: Comparator = natural_order) -> Comparator:
    """
    Build a comparator that orders keys by a derived value.

    Args:
        func: Maps a key to the value that is compared.
        less: Ordering applied to the derived values.

    Returns:
        A comparator over the original keys.
    """

    def compare(a: Any, b: Any) -> bool:
        return less(func(a), func(b))

    return compare
