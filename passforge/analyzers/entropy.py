"""
Entropy Model
==============

Theoretical entropy of uniformly generated passwords, strength tier
classification and brute-force crack time estimation.

Entropy here is combinatorial: a password of length L drawn uniformly and
independently from a pool of N characters carries ``L * log2(N)`` bits.
This is an upper bound that holds exactly for generated passwords and
only approximately for human-chosen ones.

Strength tiers (entropy bits):
    - [0, 30):   very_weak
    - [30, 40):  weak
    - [40, 60):  fair
    - [60, 80):  strong
    - [80, inf): very_strong

References:
    - NIST SP 800-63B (2017). Digital Identity Guidelines.
    - Shannon, C. E. (1948). A Mathematical Theory of Communication.
"""

from __future__ import annotations

import math

from passforge.core import charsets
from passforge.core.models import CharacterSetInfo, CrackTimeEstimate, StrengthTier

_SECONDS_PER_YEAR = 86400 * 365


class EntropyModel:
    """Entropy arithmetic and tier classification.

    Usage::

        model = EntropyModel()
        bits = model.entropy(16, 95)          # ~105.1
        model.classify(bits)                  # StrengthTier.VERY_STRONG
    """

    _ATTACK_SPEEDS: list[tuple[str, float]] = [
        ("Online attack (throttled)", 1e3),
        ("Offline attack (slow hash, e.g. bcrypt)", 1e6),
        ("Offline attack (fast hash, e.g. MD5 on GPU)", 1e9),
        ("Massive parallel / state-level", 1e12),
    ]

    # Highest bound first so the first match is the tier to return.
    _TIERS_DESCENDING: tuple[StrengthTier, ...] = tuple(reversed(StrengthTier))

    @staticmethod
    def entropy(length: int, pool_size: int) -> float:
        """Return ``length * log2(pool_size)`` bits.

        Any non-positive input yields 0.0: zero-length or zero-size inputs
        carry no information and are not errors.
        """
        if length <= 0 or pool_size <= 0:
            return 0.0
        return length * math.log2(pool_size)

    def classify(self, entropy_bits: float) -> StrengthTier:
        """Return the highest tier whose lower bound is <= *entropy_bits*."""
        for tier in self._TIERS_DESCENDING:
            if entropy_bits >= tier.lower_bound:
                return tier
        return StrengthTier.VERY_WEAK

    @staticmethod
    def character_set_info() -> CharacterSetInfo:
        return CharacterSetInfo(
            uppercase_size=len(charsets.UPPERCASE),
            lowercase_size=len(charsets.LOWERCASE),
            digits_size=len(charsets.DIGITS),
            symbols_size=len(charsets.SYMBOLS),
            full_set_size=len(charsets.FULL),
            entropy_per_character_full=math.log2(len(charsets.FULL)),
        )

    def pronounceable_entropy(self, length: int, include_numbers: bool) -> float:
        """Entropy of one pronounceable password of an already clamped *length*.

        Consonant, vowel and digit positions have different pool sizes, so
        the per-position entropies are summed.
        """
        base = length - 2 if include_numbers else length
        consonant_positions = (base + 1) // 2
        vowel_positions = base // 2
        bits = self.entropy(consonant_positions, len(charsets.CONSONANTS))
        bits += self.entropy(vowel_positions, len(charsets.VOWELS))
        if include_numbers:
            bits += self.entropy(2, len(charsets.DIGITS))
        return bits

    # ------------------------------------------------------------------ #
    #  Crack Time Estimation
    # ------------------------------------------------------------------ #

    def estimate_crack_times(self, entropy_bits: float) -> list[CrackTimeEstimate]:
        """Estimate brute-force time at each attack speed.

        On average half the keyspace is searched, i.e. ``2**(bits - 1)``
        guesses. Computed in log space so very large entropies do not
        overflow a float.
        """
        estimates: list[CrackTimeEstimate] = []
        log2_attempts = max(entropy_bits, 0.0) - 1.0

        for scenario, speed in self._ATTACK_SPEEDS:
            log2_seconds = log2_attempts - math.log2(speed)
            seconds = 2.0 ** log2_seconds if log2_seconds < 1000 else math.inf
            estimates.append(CrackTimeEstimate(
                scenario=scenario,
                guesses_per_second=speed,
                seconds=seconds,
                display=self.format_duration(seconds),
            ))

        return estimates

    @staticmethod
    def format_duration(seconds: float) -> str:
        """Format a duration in seconds as a human-readable string."""
        if seconds < 0.001:
            return "instant"
        if seconds < 1:
            return f"{seconds * 1000:.0f} milliseconds"
        if seconds < 60:
            return f"{seconds:.1f} seconds"
        if seconds < 3600:
            return f"{seconds / 60:.1f} minutes"
        if seconds < 86400:
            return f"{seconds / 3600:.1f} hours"
        if seconds < _SECONDS_PER_YEAR:
            return f"{seconds / 86400:.1f} days"

        years = seconds / _SECONDS_PER_YEAR
        if years < 1e3:
            return f"{years:.1f} years"
        if years < 1e6:
            return f"{years / 1e3:.1f} thousand years"
        if years < 1e9:
            return f"{years / 1e6:.1f} million years"
        if years < 1e12:
            return f"{years / 1e9:.1f} billion years"
        if math.isinf(years):
            return "effectively forever"
        return f"{years / 1e12:.1e} trillion years"
