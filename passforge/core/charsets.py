"""
Character Pools
================

Fixed character classes and pool composition.

The four base classes are concatenated in the order uppercase, lowercase,
digits, symbols. Together they form the 95 printable ASCII characters:
the symbol class is the 32 ASCII punctuation characters followed by the
space character.

A pool is an ordered string. Pool size is its length, not its number of
distinct characters, so a character that appears twice is twice as likely
to be drawn.
"""

from __future__ import annotations

import string

from passforge.core.models import CharacterFlags

UPPERCASE: str = string.ascii_uppercase
LOWERCASE: str = string.ascii_lowercase
DIGITS: str = string.digits
SYMBOLS: str = string.punctuation + " "

# Pronounceable generation; disjoint and together cover a-z.
CONSONANTS: str = "bcdfghjklmnpqrstvwxyz"
VOWELS: str = "aeiou"

ALPHANUMERIC: str = UPPERCASE + LOWERCASE + DIGITS
FULL: str = UPPERCASE + LOWERCASE + DIGITS + SYMBOLS

_UPPERCASE_SET = frozenset(UPPERCASE)
_LOWERCASE_SET = frozenset(LOWERCASE)
_DIGITS_SET = frozenset(DIGITS)
_SYMBOLS_SET = frozenset(SYMBOLS)


def compose(
    flags: CharacterFlags | None = None,
    *,
    uppercase: bool = True,
    lowercase: bool = True,
    digits: bool = True,
    symbols: bool = True,
) -> str:
    """Concatenate the enabled base classes in their fixed order.

    Either pass a :class:`CharacterFlags` or the individual keyword flags.
    Returns an empty string when every class is disabled; callers decide
    what fallback to apply.
    """
    if flags is not None:
        uppercase, lowercase = flags.uppercase, flags.lowercase
        digits, symbols = flags.digits, flags.symbols

    pool = ""
    if uppercase:
        pool += UPPERCASE
    if lowercase:
        pool += LOWERCASE
    if digits:
        pool += DIGITS
    if symbols:
        pool += SYMBOLS
    return pool


def classify_char(char: str) -> tuple[bool, bool, bool, bool]:
    """Return (is_upper, is_lower, is_digit, is_symbol) for one character.

    Membership is tested against the fixed classes only; ``"É"`` or
    ``"٣"`` belong to none of them.
    """
    return (
        char in _UPPERCASE_SET,
        char in _LOWERCASE_SET,
        char in _DIGITS_SET,
        char in _SYMBOLS_SET,
    )
