"""
Pronounceable Password Generator
=================================

Builds consonant-vowel-consonant-vowel... strings that approximate
speakable syllables, optionally followed by two digits. No dictionary or
phonotactic validation is applied beyond the alternation rule.

Example shapes (length 12)::

    mebakitulo47     # include_numbers=True
    rafinoxepude     # include_numbers=False
"""

from __future__ import annotations

from typing import Optional

from passforge.core import charsets
from passforge.core.random_source import SecureRandomSource
from passforge.generators.password import DEFAULT_COUNT, PasswordGenerator, clamp

PRONOUNCEABLE_MIN_LENGTH = 6
PRONOUNCEABLE_MAX_LENGTH = 64
PRONOUNCEABLE_DEFAULT_LENGTH = 12
DIGIT_SUFFIX_LENGTH = 2


class PronounceableGenerator:
    """Alternating consonant/vowel generator.

    Uses the same random source contract and count clamping as
    :class:`PasswordGenerator` but clamps length to [6, 64].
    """

    def __init__(self, random_source: Optional[SecureRandomSource] = None) -> None:
        self.random_source = random_source or SecureRandomSource()

    @staticmethod
    def clamp_length(length: int) -> int:
        return clamp(length, PRONOUNCEABLE_MIN_LENGTH, PRONOUNCEABLE_MAX_LENGTH)

    def generate(
        self,
        length: int = PRONOUNCEABLE_DEFAULT_LENGTH,
        include_numbers: bool = True,
    ) -> str:
        """Generate one pronounceable password.

        Position 0 is a consonant; even positions draw from the consonant
        set and odd positions from the vowel set. With *include_numbers*
        the last two characters are digits. The result is always exactly
        the clamped length.
        """
        length = self.clamp_length(length)
        base_length = length - DIGIT_SUFFIX_LENGTH if include_numbers else length

        choice = self.random_source.choice
        chars = [
            choice(charsets.CONSONANTS if i % 2 == 0 else charsets.VOWELS)
            for i in range(base_length)
        ]
        if include_numbers:
            chars.extend(choice(charsets.DIGITS) for _ in range(DIGIT_SUFFIX_LENGTH))
        return "".join(chars)

    def generate_multiple(
        self,
        count: int = DEFAULT_COUNT,
        length: int = PRONOUNCEABLE_DEFAULT_LENGTH,
        include_numbers: bool = True,
    ) -> list[str]:
        return [
            self.generate(length, include_numbers)
            for _ in range(PasswordGenerator.clamp_count(count))
        ]
