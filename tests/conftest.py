"""
Pytest configuration and fixtures for the chained hash map tests.

Provides reusable fixtures for:
- Building maps of either type from (key, value) arguments
- Keys with a chosen hash value, to steer pairs into known buckets
"""

import pytest

from buckets import LinearMap
from containers import ChainedHashMap


class HashedKey:
    """Key whose hash is fixed by the test, compared by name."""

    def __init__(self, name, hash_value):
        self.name = name
        self.hash_value = hash_value

    def __hash__(self):
        return self.hash_value

    def __eq__(self, other):
        return isinstance(other, HashedKey) and self.name == other.name

    def __repr__(self):
        return "HashedKey(%r, %d)" % (self.name, self.hash_value)


def _fill(target, args):
    assert len(args) % 2 == 0, "arguments must be (key, value) pairs"
    for i in range(0, len(args), 2):
        assert not target.has_key(args[i]), "keys must be unique"
        target.add(args[i], args[i + 1])
    return target


@pytest.fixture
def make_map():
    """
    Fixture that returns a function building a ChainedHashMap.

    Usage:
        m = make_map("A", "5", "B", "6")
        m = make_map("A", "5", table_size=7)
    """
    def _make(*args, table_size=None):
        m = ChainedHashMap() if table_size is None else ChainedHashMap(table_size)
        return _fill(m, args)
    return _make


@pytest.fixture
def make_ref():
    """Fixture that returns a function building the reference LinearMap."""
    def _make(*args):
        return _fill(LinearMap(), args)
    return _make


@pytest.fixture
def hashed_key():
    """Fixture that returns the HashedKey constructor: hashed_key(name, hash_value)."""
    return HashedKey
