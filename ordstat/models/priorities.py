"""
Priority sources for treap balancing.
"""

import random
from collections.abc import Iterable

from ordstat.interfaces.priority_source import PrioritySource


class RandomPriorities(PrioritySource):
    """
    Uniform random priorities from a private random.Random instance.

    Seeded once at construction, from system entropy when no seed is given,
    so two instances never share generator state.
    """

    # Width of the priority domain
    DEFAULT_BITS = 64
    MAX_BITS = 64

    def __init__(self, seed: int | None = None, bits: int = DEFAULT_BITS) -> None:
        """
        Initialize the generator.

        Args:
            seed: Integer seed for reproducible sequences. None uses system entropy.
            bits: Width of the priority domain; draws fall in [0, 2**bits).
        """
        if seed is not None and (isinstance(seed, bool) or not isinstance(seed, int)):
            raise TypeError(f"seed must be an int or None, got {type(seed).__name__}")
        if isinstance(bits, bool) or not isinstance(bits, int):
            raise TypeError(f"bits must be an int, got {type(bits).__name__}")
        if bits < 1 or bits > self.MAX_BITS:
            raise ValueError(f"bits must be in [1, {self.MAX_BITS}], got {bits}")

        self._rng = random.Random(seed)
        self._bits = bits
        self._seeded = seed is not None

    @property
    def bits(self) -> int:
        return self._bits

    @property
    def seeded(self) -> bool:
        return self._seeded

    def draw(self) -> int:
        return self._rng.getrandbits(self._bits)


class SequencePriorities(PrioritySource):
    """Replays a fixed list of priorities. Used to build exact tree shapes in tests."""

    def __init__(self, priorities: Iterable[int]) -> None:
        self._priorities = iter(priorities)
        self._drawn = 0

    @property
    def drawn(self) -> int:
        """Number of priorities consumed so far."""
        return self._drawn

    def draw(self) -> int:
        try:
            priority = next(self._priorities)
        except StopIteration:
            raise RuntimeError(
                f"priority sequence exhausted after {self._drawn} draws"
            ) from None
        self._drawn += 1
        return priority
