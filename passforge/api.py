"""
PassForge Library API
======================

Module-level functions for library callers who do not need an engine,
configuration or logging. Each call is independent; the only shared
object is the stateless OS-backed random source.

Usage::

    import passforge

    passforge.generate()                          # 16 chars, all classes
    passforge.generate(12, include_symbols=False)
    passforge.generate_from_pool(20, "0123456789ABCDEF")
    passforge.generate_pronounceable()            # e.g. "mebakitulo47"
    passforge.analyze("Kj9#mP$2vX@z").strength    # StrengthTier.STRONG
"""

from __future__ import annotations

from passforge.analyzers.entropy import EntropyModel
from passforge.analyzers.strength import PasswordAnalyzer
from passforge.core.models import CharacterSetInfo, PasswordAnalysis, StrengthTier
from passforge.core.random_source import SecureRandomSource
from passforge.generators.password import (
    DEFAULT_COUNT,
    DEFAULT_LENGTH,
    PasswordGenerator,
)
from passforge.generators.pronounceable import (
    PRONOUNCEABLE_DEFAULT_LENGTH,
    PronounceableGenerator,
)

_random_source = SecureRandomSource()
_password_generator = PasswordGenerator(_random_source)
_pronounceable_generator = PronounceableGenerator(_random_source)
_entropy_model = EntropyModel()
_analyzer = PasswordAnalyzer(_entropy_model)


def generate(
    length: int = DEFAULT_LENGTH,
    *,
    include_uppercase: bool = True,
    include_lowercase: bool = True,
    include_numbers: bool = True,
    include_symbols: bool = True,
) -> str:
    """Generate a password; see :meth:`PasswordGenerator.generate`."""
    return _password_generator.generate(
        length,
        include_uppercase=include_uppercase,
        include_lowercase=include_lowercase,
        include_numbers=include_numbers,
        include_symbols=include_symbols,
    )


def generate_from_pool(length: int = DEFAULT_LENGTH, pool: str = "") -> str:
    """Generate a password from a custom pool; empty pool means the full pool."""
    return _password_generator.generate_from_pool(length, pool)


def generate_pronounceable(
    length: int = PRONOUNCEABLE_DEFAULT_LENGTH,
    include_numbers: bool = True,
) -> str:
    return _pronounceable_generator.generate(length, include_numbers)


def generate_multiple(
    count: int = DEFAULT_COUNT,
    length: int = DEFAULT_LENGTH,
    *,
    include_uppercase: bool = True,
    include_lowercase: bool = True,
    include_numbers: bool = True,
    include_symbols: bool = True,
) -> list[str]:
    return _password_generator.generate_multiple(
        count,
        length,
        include_uppercase=include_uppercase,
        include_lowercase=include_lowercase,
        include_numbers=include_numbers,
        include_symbols=include_symbols,
    )


def generate_multiple_from_pool(
    count: int = DEFAULT_COUNT,
    length: int = DEFAULT_LENGTH,
    pool: str = "",
) -> list[str]:
    return _password_generator.generate_multiple_from_pool(count, length, pool)


def generate_multiple_pronounceable(
    count: int = DEFAULT_COUNT,
    length: int = PRONOUNCEABLE_DEFAULT_LENGTH,
    include_numbers: bool = True,
) -> list[str]:
    return _pronounceable_generator.generate_multiple(count, length, include_numbers)


def entropy(length: int, pool_size: int) -> float:
    """Theoretical entropy in bits; 0.0 for any non-positive input."""
    return _entropy_model.entropy(length, pool_size)


def classify(entropy_bits: float) -> StrengthTier:
    return _entropy_model.classify(entropy_bits)


def character_set_info() -> CharacterSetInfo:
    return _entropy_model.character_set_info()


def analyze(password: str) -> PasswordAnalysis:
    """Analyse the strength of an existing password."""
    return _analyzer.analyze(password)
