"""
Shared pytest fixtures for treap tests.
"""

import random

import pytest

from ordstat.models.sortedcontainers import Treap


@pytest.fixture
def rng():
    """Provide a seeded random generator for reproducible workloads."""
    return random.Random(20240611)


@pytest.fixture
def treap():
    """Provide an empty, seeded Treap."""
    return Treap(seed=7)


@pytest.fixture
def sample_keys():
    """Provide the keys of the basic scenario, in insertion order."""
    return [5, 3, 7, 1, 9]


@pytest.fixture
def sample_treap(sample_keys):
    """Provide a seeded Treap holding the sample keys."""
    tree = Treap(seed=11)
    for key in sample_keys:
        tree.insert(key)
    return tree
