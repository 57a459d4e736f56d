"""
PassForge Analyzers
====================

Entropy arithmetic and password strength analysis.
"""

from passforge.analyzers.entropy import EntropyModel
from passforge.analyzers.strength import PasswordAnalyzer

__all__ = [
    "EntropyModel",
    "PasswordAnalyzer",
]
