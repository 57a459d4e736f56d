"""
Secure Random Source
=====================

Uniform index selection backed by the operating system CSPRNG.

Indices are derived from 32-bit words read from ``os.urandom``. Words that
fall in the incomplete final block above the largest multiple of the
bound are rejected and redrawn, which removes the modulo bias a plain
remainder would introduce.

There is no fallback. If the OS cannot supply random bytes the draw fails
with :class:`RandomSourceError`; generating a password from anything other
than a CSPRNG would be a silent security failure.

References:
    - Python ``os.urandom`` documentation.
    - Lemire, D. (2019). Fast Random Integer Generation in an Interval.
      ACM Transactions on Modeling and Computer Simulation, 29(1).
"""

from __future__ import annotations

import os
from typing import Callable, Sequence, TypeVar

T = TypeVar("T")

_WORD_BYTES = 4
_WORD_RANGE = 1 << (8 * _WORD_BYTES)


class RandomSourceError(RuntimeError):
    """The operating system random facility failed.

    Not retryable and never downgraded to a weaker generator.
    """


class SecureRandomSource:
    """Draws unbiased indices from a cryptographically secure byte source.

    ``os.urandom`` is safe to call from multiple threads, so one instance
    may be shared freely.

    Args:
        byte_source: Callable returning *n* random bytes. Defaults to
            :func:`os.urandom`; tests inject failing or scripted sources.
    """

    def __init__(self, byte_source: Callable[[int], bytes] = os.urandom) -> None:
        self._byte_source = byte_source

    def _draw_word(self) -> int:
        try:
            raw = self._byte_source(_WORD_BYTES)
        except (OSError, NotImplementedError) as exc:
            raise RandomSourceError(
                "Operating system random source failed"
            ) from exc
        if len(raw) != _WORD_BYTES:
            raise RandomSourceError(
                f"Random source returned {len(raw)} bytes, expected {_WORD_BYTES}"
            )
        return int.from_bytes(raw, "little")

    def next_index(self, bound: int) -> int:
        """Return a uniformly distributed integer in ``[0, bound)``.

        Raises:
            ValueError: If *bound* is not positive or exceeds 2**32.
            RandomSourceError: If the byte source fails.
        """
        if bound <= 0:
            raise ValueError(f"bound must be positive, got {bound}")
        if bound > _WORD_RANGE:
            raise ValueError(f"bound must not exceed {_WORD_RANGE}, got {bound}")

        # Words come from the injectable byte source, not secrets.randbelow.
        limit = _WORD_RANGE - (_WORD_RANGE % bound)
        while True:
            word = self._draw_word()
            if word < limit:
                return word % bound

    def choice(self, pool: Sequence[T]) -> T:
        """Return one element of a non-empty *pool*."""
        return pool[self.next_index(len(pool))]
