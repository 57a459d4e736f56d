"""
Password Strength Analyzer
===========================

Estimates the strength of an arbitrary password string.

The effective pool is the sum of the sizes of the character classes the
password uses (26 uppercase, 26 lowercase, 10 digits, 33 symbols), not the
password's own alphabet. This models an attacker who knows which classes
are in play. It overestimates entropy for short passwords that reuse one
class heavily ("aaaaaaaa" scores as 8 * log2(26)); that is accepted.

Characters outside the four classes (accented letters, emoji, ...) count
toward length but add nothing to the pool.

Suggestions are produced by independent checks in a fixed order, so the
same input always yields the same list.

References:
    - NIST SP 800-63B (2017). Digital Identity Guidelines.
"""

from __future__ import annotations

from typing import Optional

from passforge.analyzers.entropy import EntropyModel
from passforge.core import charsets
from passforge.core.models import PasswordAnalysis

_CLASS_SIZES = (
    len(charsets.UPPERCASE),
    len(charsets.LOWERCASE),
    len(charsets.DIGITS),
    len(charsets.SYMBOLS),
)

_MISSING_CLASS_SUGGESTIONS = (
    "Add uppercase letters",
    "Add lowercase letters",
    "Add numbers",
    "Add special symbols",
)

_MIN_LENGTH = 8
_RECOMMENDED_LENGTH = 12
_COMPLEXITY_BITS = 50.0


class PasswordAnalyzer:
    """Analyses password strength from character classes and length.

    Usage::

        analyzer = PasswordAnalyzer()
        result = analyzer.analyze("Kj9#mP$2vX@z")
        print(result.strength.label, f"{result.entropy:.1f} bits")

    Args:
        entropy_model: Model used for entropy and tier classification.
        include_crack_times: Attach brute-force crack time estimates.
    """

    def __init__(
        self,
        entropy_model: Optional[EntropyModel] = None,
        *,
        include_crack_times: bool = True,
    ) -> None:
        self.entropy_model = entropy_model or EntropyModel()
        self.include_crack_times = include_crack_times

    def analyze(self, password: str) -> PasswordAnalysis:
        """Perform password strength analysis.

        Args:
            password: The password to analyse. May be empty.

        Returns:
            PasswordAnalysis with entropy, tier, diversity and suggestions.
        """
        present = self._detect_classes(password)
        length = len(password)
        pool_size = sum(size for size, used in zip(_CLASS_SIZES, present) if used)

        entropy = self.entropy_model.entropy(length, pool_size)
        crack_times = (
            self.entropy_model.estimate_crack_times(entropy)
            if self.include_crack_times
            else []
        )

        return PasswordAnalysis(
            length=length,
            has_uppercase=present[0],
            has_lowercase=present[1],
            has_digits=present[2],
            has_symbols=present[3],
            char_pool_size=pool_size,
            entropy=entropy,
            strength=self.entropy_model.classify(entropy),
            diversity_score=sum(present) / len(present),
            suggestions=self._generate_suggestions(length, present, entropy),
            password_masked=self.mask_password(password),
            crack_time_estimates=crack_times,
        )

    @staticmethod
    def _detect_classes(password: str) -> tuple[bool, bool, bool, bool]:
        """Single pass over *password* recording which classes occur."""
        upper = lower = digit = symbol = False
        for char in password:
            is_upper, is_lower, is_digit, is_symbol = charsets.classify_char(char)
            upper |= is_upper
            lower |= is_lower
            digit |= is_digit
            symbol |= is_symbol
        return upper, lower, digit, symbol

    @staticmethod
    def _generate_suggestions(
        length: int,
        present: tuple[bool, bool, bool, bool],
        entropy: float,
    ) -> list[str]:
        suggestions: list[str] = []

        if length < _MIN_LENGTH:
            suggestions.append("Use at least 8 characters")
        if length < _RECOMMENDED_LENGTH:
            suggestions.append("Consider 12+ characters for better security")

        for used, suggestion in zip(present, _MISSING_CLASS_SUGGESTIONS):
            if not used:
                suggestions.append(suggestion)

        if entropy < _COMPLEXITY_BITS:
            suggestions.append("Increase overall complexity")

        return suggestions

    @staticmethod
    def mask_password(password: str) -> str:
        """Keep the first and last character; mask everything between.

        Passwords of two characters or fewer are masked entirely.
        """
        if len(password) <= 2:
            return "*" * len(password)
        return password[0] + "*" * (len(password) - 2) + password[-1]
