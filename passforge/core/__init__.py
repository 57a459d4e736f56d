"""
PassForge Core Module
======================

Data models, character pools and the secure random source. The engine
lives in :mod:`passforge.core.engine` and is imported from there, since it
depends on the generator and analyzer packages.
"""

from passforge.core.models import (
    CharacterFlags,
    CharacterSetInfo,
    CrackTimeEstimate,
    EntropyEstimate,
    GeneratedBatch,
    GenerationConfig,
    GenerationMode,
    PasswordAnalysis,
    StrengthTier,
)
from passforge.core.random_source import RandomSourceError, SecureRandomSource

__all__ = [
    "CharacterFlags",
    "CharacterSetInfo",
    "CrackTimeEstimate",
    "EntropyEstimate",
    "GeneratedBatch",
    "GenerationConfig",
    "GenerationMode",
    "PasswordAnalysis",
    "RandomSourceError",
    "SecureRandomSource",
    "StrengthTier",
]
