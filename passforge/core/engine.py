"""
PassForge Engine
=================

Central facade over the generators and the strength analyzer. The engine
applies configured defaults for omitted parameters, builds
:class:`GeneratedBatch` records for the output layer and logs every
operation.

Logged fields are modes, lengths, counts and pool sizes. Generated or
analysed passwords are never logged.

A :class:`RandomSourceError` is logged at CRITICAL and re-raised: the
engine never substitutes weaker randomness and never returns a partial
batch.
"""

from __future__ import annotations

from typing import Optional

from shared.config import ForgeConfig
from shared.logger import ForgeLogger

from passforge.analyzers.entropy import EntropyModel
from passforge.analyzers.strength import PasswordAnalyzer
from passforge.core import charsets
from passforge.core.models import (
    CharacterFlags,
    CharacterSetInfo,
    EntropyEstimate,
    GeneratedBatch,
    GenerationConfig,
    GenerationMode,
    PasswordAnalysis,
)
from passforge.core.random_source import RandomSourceError, SecureRandomSource
from passforge.generators.password import PasswordGenerator
from passforge.generators.pronounceable import PronounceableGenerator


class ForgeEngine:
    """Orchestrates password generation and analysis.

    Usage::

        engine = ForgeEngine()
        batch = engine.generate_batch(count=5, length=20)
        report = engine.analyze("Kj9#mP$2vX@z")

    Attributes:
        config: PassForge configuration instance.
        logger: Logger for the engine.
    """

    def __init__(
        self,
        config: Optional[ForgeConfig] = None,
        random_source: Optional[SecureRandomSource] = None,
    ) -> None:
        self.config = config or ForgeConfig()
        settings = self.config.global_settings
        self.logger = ForgeLogger(
            "engine",
            log_level="DEBUG" if settings.debug else settings.log_level,
            log_file=settings.log_file,
            json_logs=settings.log_json,
        )

        source = random_source or SecureRandomSource()
        self.entropy_model = EntropyModel()
        self._password_generator = PasswordGenerator(source)
        self._pronounceable_generator = PronounceableGenerator(source)
        self._analyzer = PasswordAnalyzer(
            self.entropy_model,
            include_crack_times=self.config.analyzer.show_crack_times,
        )

    # ------------------------------------------------------------------ #
    #  Generation
    # ------------------------------------------------------------------ #

    def default_flags(self) -> CharacterFlags:
        gen = self.config.generator
        return CharacterFlags(
            uppercase=gen.include_uppercase,
            lowercase=gen.include_lowercase,
            digits=gen.include_numbers,
            symbols=gen.include_symbols,
        )

    def generate(
        self,
        length: Optional[int] = None,
        flags: Optional[CharacterFlags] = None,
    ) -> str:
        """Generate one password from character-type flags."""
        return self.generate_batch(count=1, length=length, flags=flags).passwords[0]

    def generate_from_pool(self, length: Optional[int] = None, pool: str = "") -> str:
        """Generate one password from a caller-supplied pool.

        An empty *pool* means the full pool, as in
        :meth:`PasswordGenerator.generate_from_pool`.
        """
        return self.generate_batch(count=1, length=length, pool=pool).passwords[0]

    def generate_pronounceable(
        self,
        length: Optional[int] = None,
        include_numbers: bool = True,
    ) -> str:
        """Generate one pronounceable password."""
        batch = self.generate_batch(
            count=1,
            length=length,
            mode=GenerationMode.PRONOUNCEABLE,
            include_numbers=include_numbers,
        )
        return batch.passwords[0]

    def generate_with(
        self,
        request: GenerationConfig,
        count: Optional[int] = None,
    ) -> GeneratedBatch:
        """Generate a batch described by a :class:`GenerationConfig`."""
        return self.generate_batch(
            count=count,
            length=request.length,
            flags=request.flags,
            pool=request.pool,
        )

    def generate_batch(
        self,
        count: Optional[int] = None,
        length: Optional[int] = None,
        *,
        mode: Optional[GenerationMode] = None,
        flags: Optional[CharacterFlags] = None,
        pool: Optional[str] = None,
        include_numbers: bool = True,
    ) -> GeneratedBatch:
        """Generate a batch and describe it.

        The mode is inferred when omitted: a non-empty *pool* selects
        ``CUSTOM_POOL``, otherwise ``CHARSET``.

        Args:
            count: Number of passwords; config default when ``None``.
            length: Password length; config default when ``None``.
            mode: Generation mode.
            flags: Character classes for ``CHARSET`` mode.
            pool: Explicit pool for ``CUSTOM_POOL`` mode.
            include_numbers: Digit suffix for ``PRONOUNCEABLE`` mode.

        Returns:
            GeneratedBatch with clamped length, pool size and entropy.

        Raises:
            RandomSourceError: If the OS random source fails.
        """
        gen_cfg = self.config.generator
        count = gen_cfg.default_count if count is None else count
        if mode is None:
            mode = GenerationMode.CUSTOM_POOL if pool else GenerationMode.CHARSET

        with self.logger.operation(f"generate_{mode.value}"), \
                self.logger.timed(f"{mode.value} generation"):
            try:
                if mode is GenerationMode.PRONOUNCEABLE:
                    batch = self._pronounceable_batch(count, length, include_numbers)
                else:
                    batch = self._charset_batch(count, length, flags, pool)
            except RandomSourceError:
                self.logger.critical(
                    "Secure random source failed; no passwords generated",
                    exc_info=True,
                )
                raise

            self.logger.info(
                "Generated %d %s password(s)",
                batch.count,
                mode.value,
                length=batch.length,
                pool_size=batch.pool_size,
            )
        return batch

    def _charset_batch(
        self,
        count: int,
        length: Optional[int],
        flags: Optional[CharacterFlags],
        pool: Optional[str],
    ) -> GeneratedBatch:
        gen = self._password_generator
        length = self.config.generator.default_length if length is None else length
        clamped = gen.clamp_length(length)
        if clamped != length:
            self.logger.debug("Length %d clamped to %d", length, clamped)

        if pool:
            return self._describe(
                GenerationMode.CUSTOM_POOL,
                clamped,
                len(pool),
                gen.generate_multiple_from_pool(count, clamped, pool),
            )

        if pool is not None:
            # An empty custom pool means the full pool, whatever the flags say.
            flags = CharacterFlags()
        flags = flags or self.default_flags()
        if not flags.any_enabled:
            self.logger.debug("No character class enabled; using alphanumeric pool")

        class_kwargs = dict(
            include_uppercase=flags.uppercase,
            include_lowercase=flags.lowercase,
            include_numbers=flags.digits,
            include_symbols=flags.symbols,
        )
        return self._describe(
            GenerationMode.CHARSET,
            clamped,
            len(gen.resolve_pool(**class_kwargs)),
            gen.generate_multiple(count, clamped, **class_kwargs),
        )

    def _describe(
        self,
        mode: GenerationMode,
        length: int,
        pool_size: int,
        passwords: list[str],
    ) -> GeneratedBatch:
        return GeneratedBatch(
            mode=mode,
            length=length,
            pool_size=pool_size,
            entropy_bits=self.entropy_model.entropy(length, pool_size),
            passwords=passwords,
        )

    def _pronounceable_batch(
        self,
        count: int,
        length: Optional[int],
        include_numbers: bool,
    ) -> GeneratedBatch:
        gen = self._pronounceable_generator
        length = self.config.generator.pronounceable_length if length is None else length
        clamped = gen.clamp_length(length)
        return GeneratedBatch(
            mode=GenerationMode.PRONOUNCEABLE,
            length=clamped,
            pool_size=len(charsets.CONSONANTS),
            entropy_bits=self.entropy_model.pronounceable_entropy(clamped, include_numbers),
            passwords=gen.generate_multiple(count, clamped, include_numbers),
        )

    # ------------------------------------------------------------------ #
    #  Analysis
    # ------------------------------------------------------------------ #

    def analyze(self, password: str) -> PasswordAnalysis:
        """Analyse the strength of *password*."""
        with self.logger.operation("analyze"), self.logger.timed("analysis"):
            result = self._analyzer.analyze(password)
            if not self.config.analyzer.mask_passwords:
                result = result.model_copy(update={"password_masked": password})
            self.logger.info(
                "Analysed password: strength=%s entropy=%.1f bits",
                result.strength.value,
                result.entropy,
                length=result.length,
            )
        return result

    def entropy(self, length: int, pool_size: int) -> float:
        return self.entropy_model.entropy(length, pool_size)

    def character_set_info(self) -> CharacterSetInfo:
        return self.entropy_model.character_set_info()

    def estimate_entropy(self, length: int, pool_size: int) -> EntropyEstimate:
        bits = self.entropy_model.entropy(length, pool_size)
        return EntropyEstimate(
            length=length,
            pool_size=pool_size,
            entropy_bits=bits,
            strength=self.entropy_model.classify(bits),
        )
