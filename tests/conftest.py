"""
Shared test fixtures: deterministic and failing random sources.
"""

import sys
from pathlib import Path

import pytest

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from passforge.core.random_source import SecureRandomSource


class FirstIndexSource(SecureRandomSource):
    """Always selects index 0."""

    def next_index(self, bound):
        return 0


class LastIndexSource(SecureRandomSource):
    """Always selects the last index of the pool."""

    def next_index(self, bound):
        return bound - 1


def failing_urandom(n):
    raise OSError("entropy pool unavailable")


@pytest.fixture
def first_source():
    return FirstIndexSource()


@pytest.fixture
def last_source():
    return LastIndexSource()


@pytest.fixture
def broken_source():
    return SecureRandomSource(byte_source=failing_urandom)
