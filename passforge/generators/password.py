"""
Password Generator
===================

Generates passwords from character-type flags or from a caller-supplied
pool. Every position is drawn independently from the pool using
:class:`SecureRandomSource`; repeated characters are allowed.

The API is total: out-of-range lengths and counts are clamped and empty
pools are replaced, never rejected. The only error that can escape is a
:class:`RandomSourceError`.
"""

from __future__ import annotations

from typing import Optional

from passforge.core import charsets
from passforge.core.random_source import SecureRandomSource

MIN_LENGTH = 4
MAX_LENGTH = 128
MIN_COUNT = 1
MAX_COUNT = 1000

DEFAULT_LENGTH = 16
DEFAULT_COUNT = 10


def clamp(value: int, low: int, high: int) -> int:
    return max(low, min(high, value))


class PasswordGenerator:
    """Random password generation over composed or custom pools.

    Usage::

        gen = PasswordGenerator()
        gen.generate(20, include_symbols=False)
        gen.generate_from_pool(16, "0123456789ABCDEF")
        gen.generate_multiple(5)

    Args:
        random_source: Source of uniform indices. A fresh
            :class:`SecureRandomSource` is used when omitted.
    """

    min_length = MIN_LENGTH
    max_length = MAX_LENGTH

    def __init__(self, random_source: Optional[SecureRandomSource] = None) -> None:
        self.random_source = random_source or SecureRandomSource()

    # ------------------------------------------------------------------ #
    #  Single password
    # ------------------------------------------------------------------ #

    def generate(
        self,
        length: int = DEFAULT_LENGTH,
        *,
        include_uppercase: bool = True,
        include_lowercase: bool = True,
        include_numbers: bool = True,
        include_symbols: bool = True,
    ) -> str:
        """Generate a password from the enabled character classes.

        Args:
            length: Desired length, clamped to [4, 128].
            include_uppercase: Include A-Z.
            include_lowercase: Include a-z.
            include_numbers: Include 0-9.
            include_symbols: Include punctuation and space.

        Returns:
            A password of exactly the clamped length. When every class is
            disabled the 62-character alphanumeric pool is used instead.
        """
        pool = self.resolve_pool(
            include_uppercase=include_uppercase,
            include_lowercase=include_lowercase,
            include_numbers=include_numbers,
            include_symbols=include_symbols,
        )
        return self._draw(self.clamp_length(length), pool)

    def generate_from_pool(self, length: int = DEFAULT_LENGTH, pool: str = "") -> str:
        """Generate a password using exactly the characters of *pool*.

        An empty pool falls back to :meth:`generate` with every class
        enabled (the full 95-character pool), not to the alphanumeric pool.
        """
        if not pool:
            return self.generate(length)
        return self._draw(self.clamp_length(length), pool)

    # ------------------------------------------------------------------ #
    #  Bulk generation
    # ------------------------------------------------------------------ #

    def generate_multiple(
        self,
        count: int = DEFAULT_COUNT,
        length: int = DEFAULT_LENGTH,
        *,
        include_uppercase: bool = True,
        include_lowercase: bool = True,
        include_numbers: bool = True,
        include_symbols: bool = True,
    ) -> list[str]:
        """Generate ``clamp(count, 1, 1000)`` independent passwords.

        No deduplication is performed.
        """
        return [
            self.generate(
                length,
                include_uppercase=include_uppercase,
                include_lowercase=include_lowercase,
                include_numbers=include_numbers,
                include_symbols=include_symbols,
            )
            for _ in range(self.clamp_count(count))
        ]

    def generate_multiple_from_pool(
        self,
        count: int = DEFAULT_COUNT,
        length: int = DEFAULT_LENGTH,
        pool: str = "",
    ) -> list[str]:
        return [
            self.generate_from_pool(length, pool)
            for _ in range(self.clamp_count(count))
        ]

    # ------------------------------------------------------------------ #
    #  Helpers
    # ------------------------------------------------------------------ #

    @staticmethod
    def resolve_pool(
        *,
        include_uppercase: bool = True,
        include_lowercase: bool = True,
        include_numbers: bool = True,
        include_symbols: bool = True,
    ) -> str:
        """Compose the pool for a set of flags, applying the empty fallback."""
        pool = charsets.compose(
            uppercase=include_uppercase,
            lowercase=include_lowercase,
            digits=include_numbers,
            symbols=include_symbols,
        )
        return pool or charsets.ALPHANUMERIC

    @classmethod
    def clamp_length(cls, length: int) -> int:
        return clamp(length, cls.min_length, cls.max_length)

    @staticmethod
    def clamp_count(count: int) -> int:
        return clamp(count, MIN_COUNT, MAX_COUNT)

    def _draw(self, length: int, pool: str) -> str:
        choice = self.random_source.choice
        return "".join(choice(pool) for _ in range(length))
