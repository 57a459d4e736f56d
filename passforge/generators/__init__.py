"""
PassForge Generators
=====================

Password generators built on the secure random source.
"""

from passforge.generators.password import PasswordGenerator
from passforge.generators.pronounceable import PronounceableGenerator

__all__ = [
    "PasswordGenerator",
    "PronounceableGenerator",
]
