"""
PassForge Core Data Models
===========================

Pydantic models for generation requests, generated batches, character set
metadata and password strength reports. All models serialise to JSON via
``model_dump()`` and are consumed by both the console output layer and the
JSON report generator.

References:
    - NIST SP 800-63B (2017). Digital Identity Guidelines --
      Authentication and Lifecycle Management.
    - Shannon, C. E. (1948). A Mathematical Theory of Communication.
"""

from __future__ import annotations

import enum

from pydantic import BaseModel, ConfigDict, Field


# ===================================================================== #
#  Enumerations
# ===================================================================== #


class StrengthTier(str, enum.Enum):
    """Qualitative password strength, ordered weakest to strongest.

    A tier is entered when entropy is at or above its lower bound and
    below the next tier's bound. The top tier is open-ended.
    """

    VERY_WEAK = "very_weak"
    WEAK = "weak"
    FAIR = "fair"
    STRONG = "strong"
    VERY_STRONG = "very_strong"

    @property
    def lower_bound(self) -> float:
        """Minimum entropy in bits for this tier."""
        return _TIER_BOUNDS[self]

    @property
    def label(self) -> str:
        return self.value.replace("_", " ").title()

    @property
    def rank(self) -> int:
        return list(StrengthTier).index(self)


_TIER_BOUNDS: dict[StrengthTier, float] = {
    StrengthTier.VERY_WEAK: 0.0,
    StrengthTier.WEAK: 30.0,
    StrengthTier.FAIR: 40.0,
    StrengthTier.STRONG: 60.0,
    StrengthTier.VERY_STRONG: 80.0,
}


class GenerationMode(str, enum.Enum):
    """How a batch of passwords was produced."""

    CHARSET = "charset"
    CUSTOM_POOL = "custom_pool"
    PRONOUNCEABLE = "pronounceable"


# ===================================================================== #
#  Generation Models
# ===================================================================== #


class CharacterFlags(BaseModel):
    """Which base character classes a composed pool includes.

    Attributes:
        uppercase: Include A-Z.
        lowercase: Include a-z.
        digits: Include 0-9.
        symbols: Include ASCII punctuation and space.
    """

    model_config = ConfigDict(frozen=True)

    uppercase: bool = True
    lowercase: bool = True
    digits: bool = True
    symbols: bool = True

    @property
    def any_enabled(self) -> bool:
        return self.uppercase or self.lowercase or self.digits or self.symbols


class GenerationConfig(BaseModel):
    """A generation request: a length plus either flags or an explicit pool.

    When ``pool`` is set the flags are ignored.
    """

    model_config = ConfigDict(frozen=True)

    length: int = 16
    flags: CharacterFlags = Field(default_factory=CharacterFlags)
    pool: str | None = None


class GeneratedBatch(BaseModel):
    """A batch of passwords produced by one engine call.

    Attributes:
        mode: Generation mode used.
        length: Clamped length of every password in the batch.
        pool_size: Size of the pool each position was drawn from. For
            pronounceable passwords this is the largest per-position pool.
        entropy_bits: Theoretical entropy of one password of the batch.
        passwords: The generated passwords.
    """

    mode: GenerationMode
    length: int
    pool_size: int
    entropy_bits: float = 0.0
    passwords: list[str] = Field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.passwords)


# ===================================================================== #
#  Entropy Models
# ===================================================================== #


class CharacterSetInfo(BaseModel):
    """Sizes of the built-in character classes.

    Attributes:
        uppercase_size: Number of uppercase letters.
        lowercase_size: Number of lowercase letters.
        digits_size: Number of digits.
        symbols_size: Number of symbols.
        full_set_size: Size of the pool with every class enabled.
        entropy_per_character_full: log2(full_set_size).
    """

    model_config = ConfigDict(frozen=True)

    uppercase_size: int
    lowercase_size: int
    digits_size: int
    symbols_size: int
    full_set_size: int
    entropy_per_character_full: float


class EntropyEstimate(BaseModel):
    """Theoretical entropy of a (length, pool size) configuration."""

    model_config = ConfigDict(frozen=True)

    length: int
    pool_size: int
    entropy_bits: float
    strength: StrengthTier


class CrackTimeEstimate(BaseModel):
    """Brute-force time estimate at a given attack speed.

    Attributes:
        scenario: Description of the attack scenario.
        guesses_per_second: Attack speed.
        seconds: Expected time to find the password.
        display: Human-readable duration.
    """

    model_config = ConfigDict(frozen=True)

    scenario: str
    guesses_per_second: float
    seconds: float
    display: str = ""


# ===================================================================== #
#  Analysis Models
# ===================================================================== #


class PasswordAnalysis(BaseModel):
    """Strength report derived entirely from one password string.

    Attributes:
        length: Number of characters (code points).
        has_uppercase: Contains at least one A-Z.
        has_lowercase: Contains at least one a-z.
        has_digits: Contains at least one 0-9.
        has_symbols: Contains at least one symbol-class character.
        char_pool_size: Sum of the sizes of the classes present.
        entropy: Estimated entropy in bits.
        strength: Tier derived from ``entropy``.
        diversity_score: Fraction of the four classes present.
        suggestions: Improvement suggestions in a fixed order.
        password_masked: Display-safe form of the password.
        crack_time_estimates: Brute-force estimates for ``entropy``.
    """

    model_config = ConfigDict(frozen=True)

    length: int = 0
    has_uppercase: bool = False
    has_lowercase: bool = False
    has_digits: bool = False
    has_symbols: bool = False
    char_pool_size: int = 0
    entropy: float = Field(default=0.0, ge=0.0)
    strength: StrengthTier = StrengthTier.VERY_WEAK
    diversity_score: float = Field(default=0.0, ge=0.0, le=1.0)
    suggestions: list[str] = Field(default_factory=list)
    password_masked: str = ""
    crack_time_estimates: list[CrackTimeEstimate] = Field(default_factory=list)

    @property
    def classes_present(self) -> int:
        return sum(
            (self.has_uppercase, self.has_lowercase, self.has_digits, self.has_symbols)
        )
