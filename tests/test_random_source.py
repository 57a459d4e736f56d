"""
Tests for the Secure Random Source
==================================
Tests for SecureRandomSource in passforge/core/random_source.py.
"""

import sys
from collections import Counter
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from passforge.core import charsets
from passforge.core.random_source import RandomSourceError, SecureRandomSource


def scripted(*words):
    """Byte source that returns the given 32-bit words in order."""
    chunks = iter(w.to_bytes(4, "little") for w in words)
    return lambda n: next(chunks)


class TestNextIndex:
    """Range and argument checks."""

    @pytest.fixture
    def source(self):
        return SecureRandomSource()

    @pytest.mark.parametrize("bound", [1, 2, 7, 26, 62, 95, 1000])
    def test_index_in_range(self, source, bound):
        for _ in range(200):
            assert 0 <= source.next_index(bound) < bound

    def test_bound_one_always_zero(self, source):
        assert {source.next_index(1) for _ in range(50)} == {0}

    @pytest.mark.parametrize("bound", [0, -1, -95])
    def test_non_positive_bound_rejected(self, source, bound):
        with pytest.raises(ValueError):
            source.next_index(bound)

    def test_bound_above_word_range_rejected(self, source):
        with pytest.raises(ValueError):
            source.next_index(2**32 + 1)

    def test_choice_returns_pool_member(self, source):
        pool = "xyz"
        assert all(source.choice(pool) in pool for _ in range(100))


class TestRejectionSampling:
    """Draws in the biased tail are discarded."""

    def test_tail_word_is_redrawn(self):
        # 2**32 % 3 == 1, so 0xFFFFFFFF is the single rejected value.
        source = SecureRandomSource(byte_source=scripted(0xFFFFFFFF, 5))
        assert source.next_index(3) == 2

    def test_word_below_limit_used_directly(self):
        source = SecureRandomSource(byte_source=scripted(0xFFFFFFFE))
        assert source.next_index(3) == 0xFFFFFFFE % 3

    def test_power_of_two_bound_never_rejects(self):
        source = SecureRandomSource(byte_source=scripted(0xFFFFFFFF))
        assert source.next_index(16) == 15


class TestFailClosed:
    """OS random failures surface as RandomSourceError."""

    def test_os_error_raises(self, broken_source):
        with pytest.raises(RandomSourceError):
            broken_source.next_index(10)

    def test_error_chains_original(self, broken_source):
        with pytest.raises(RandomSourceError) as excinfo:
            broken_source.choice("abc")
        assert isinstance(excinfo.value.__cause__, OSError)

    def test_short_read_raises(self):
        source = SecureRandomSource(byte_source=lambda n: b"\x00")
        with pytest.raises(RandomSourceError):
            source.next_index(10)

    def test_is_runtime_error(self):
        assert issubclass(RandomSourceError, RuntimeError)


class TestDistribution:
    """Statistical sanity checks over the full 95-character pool."""

    def test_single_character_draws_cover_pool(self):
        source = SecureRandomSource()
        counts = Counter(source.choice(charsets.FULL) for _ in range(10_000))

        assert set(counts) == set(charsets.FULL)
        assert max(counts.values()) / 10_000 < 0.05

    def test_concurrent_draws(self):
        source = SecureRandomSource()

        def draw(_):
            return [source.next_index(95) for _ in range(500)]

        with ThreadPoolExecutor(max_workers=8) as pool:
            batches = list(pool.map(draw, range(8)))

        flat = [i for batch in batches for i in batch]
        assert len(flat) == 4000
        assert all(0 <= i < 95 for i in flat)
