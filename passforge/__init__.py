"""
PassForge -- Secure Password Generation and Strength Analysis
==============================================================

Generates passwords from the operating system CSPRNG (character-class
composition, custom pools, pronounceable patterns) and estimates the
strength of existing passwords from their entropy.

Modules:
    - passforge.api: Module-level library functions
    - passforge.core: Data models, character pools, random source, engine
    - passforge.generators: Password and pronounceable generators
    - passforge.analyzers: Entropy model and strength analyzer
    - passforge.output: Console and JSON report output
    - passforge.cli: Click-based command-line interface

References:
    - NIST SP 800-63B (2017). Digital Identity Guidelines.
    - NIST SP 800-90A Rev. 1 (2015). Recommendation for Random Number
      Generation Using Deterministic Random Bit Generators.
"""

from passforge.api import (
    analyze,
    character_set_info,
    classify,
    entropy,
    generate,
    generate_from_pool,
    generate_multiple,
    generate_multiple_from_pool,
    generate_multiple_pronounceable,
    generate_pronounceable,
)
from passforge.core.engine import ForgeEngine
from passforge.core.models import PasswordAnalysis, StrengthTier
from passforge.core.random_source import RandomSourceError

__version__ = "1.0.0"
__tool_name__ = "passforge"

__all__ = [
    "ForgeEngine",
    "PasswordAnalysis",
    "RandomSourceError",
    "StrengthTier",
    "analyze",
    "character_set_info",
    "classify",
    "entropy",
    "generate",
    "generate_from_pool",
    "generate_multiple",
    "generate_multiple_from_pool",
    "generate_multiple_pronounceable",
    "generate_pronounceable",
]
