"""
Tests for the PassForge Engine
==============================
Tests for ForgeEngine in passforge/core/engine.py: configured defaults,
batch description, fail-closed behaviour and log hygiene.
"""

import logging
import math
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from shared.config import ForgeConfig
from passforge.core import charsets
from passforge.core.engine import ForgeEngine
from passforge.core.models import (
    CharacterFlags,
    GenerationConfig,
    GenerationMode,
    StrengthTier,
)
from passforge.core.random_source import RandomSourceError


class _Collector(logging.Handler):
    def __init__(self):
        super().__init__(level=logging.DEBUG)
        self.records = []

    def emit(self, record):
        self.records.append(record)


@pytest.fixture
def engine():
    return ForgeEngine()


@pytest.fixture
def debug_engine():
    config = ForgeConfig()
    config.global_settings.debug = True
    eng = ForgeEngine(config)
    collector = _Collector()
    eng.logger.underlying.addHandler(collector)
    eng.collector = collector
    return eng


class TestGenerateBatch:

    def test_config_defaults(self, engine):
        batch = engine.generate_batch()
        assert batch.mode is GenerationMode.CHARSET
        assert batch.count == 10
        assert batch.length == 16
        assert batch.pool_size == 95
        assert batch.entropy_bits == pytest.approx(16 * math.log2(95))
        assert all(len(p) == 16 for p in batch.passwords)

    def test_configured_defaults_applied(self):
        config = ForgeConfig()
        config.generator.default_length = 24
        config.generator.default_count = 3
        config.generator.include_symbols = False
        batch = ForgeEngine(config).generate_batch()
        assert batch.count == 3
        assert batch.length == 24
        assert batch.pool_size == 62
        assert all(set(p) <= set(charsets.ALPHANUMERIC) for p in batch.passwords)

    def test_length_and_count_clamped(self, engine):
        batch = engine.generate_batch(count=5000, length=1)
        assert batch.count == 1000
        assert batch.length == 4

    def test_no_classes_falls_back_to_alphanumeric(self, engine):
        flags = CharacterFlags(uppercase=False, lowercase=False, digits=False, symbols=False)
        batch = engine.generate_batch(count=5, flags=flags)
        assert batch.pool_size == 62

    def test_custom_pool(self, engine):
        batch = engine.generate_batch(count=3, length=8, pool="01")
        assert batch.mode is GenerationMode.CUSTOM_POOL
        assert batch.pool_size == 2
        assert batch.entropy_bits == 8.0
        assert all(set(p) <= {"0", "1"} for p in batch.passwords)

    def test_empty_pool_means_full_pool(self, engine):
        flags = CharacterFlags(uppercase=False, lowercase=True, digits=False, symbols=False)
        batch = engine.generate_batch(count=2, pool="", flags=flags)
        assert batch.mode is GenerationMode.CHARSET
        assert batch.pool_size == 95

    def test_pronounceable_batch(self, engine):
        batch = engine.generate_batch(count=4, mode=GenerationMode.PRONOUNCEABLE)
        assert batch.mode is GenerationMode.PRONOUNCEABLE
        assert batch.length == 12
        assert batch.pool_size == len(charsets.CONSONANTS)
        assert all(p[-2:].isdigit() for p in batch.passwords)

    def test_pronounceable_without_numbers(self, engine):
        batch = engine.generate_batch(
            count=2, length=8, mode=GenerationMode.PRONOUNCEABLE, include_numbers=False
        )
        assert all(p.isalpha() for p in batch.passwords)

    def test_generate_with_request(self, engine):
        request = GenerationConfig(length=20, flags=CharacterFlags(symbols=False))
        batch = engine.generate_with(request, count=2)
        assert batch.count == 2
        assert batch.length == 20
        assert batch.pool_size == 62


class TestSinglePasswords:

    def test_generate(self, engine):
        assert len(engine.generate()) == 16
        assert len(engine.generate(length=30)) == 30

    def test_generate_from_pool(self, engine):
        assert engine.generate_from_pool(6, "x") == "xxxxxx"
        assert engine.generate_from_pool(pool="x", length=6) == "xxxxxx"

    def test_generate_from_pool_matches_generator_order(self, engine):
        password = engine.generate_from_pool(20, "ab")
        assert len(password) == 20
        assert set(password) <= {"a", "b"}

    def test_generate_from_empty_pool(self, engine):
        assert len(engine.generate_from_pool(10)) == 10

    def test_generate_pronounceable(self, engine):
        password = engine.generate_pronounceable(length=10, include_numbers=False)
        assert len(password) == 10
        assert password[0] in charsets.CONSONANTS


class TestFailClosed:

    def test_random_failure_reraised(self, broken_source):
        engine = ForgeEngine(random_source=broken_source)
        with pytest.raises(RandomSourceError):
            engine.generate_batch(count=3)

    def test_random_failure_logged_critical(self, broken_source):
        config = ForgeConfig()
        engine = ForgeEngine(config, random_source=broken_source)
        collector = _Collector()
        engine.logger.underlying.addHandler(collector)

        with pytest.raises(RandomSourceError):
            engine.generate_pronounceable()

        levels = [r.levelno for r in collector.records]
        assert logging.CRITICAL in levels


class TestLogging:

    def test_passwords_never_logged(self, debug_engine):
        batch = debug_engine.generate_batch(count=5, length=12)
        report = debug_engine.analyze("Tr0ub4dor&3")

        text = " ".join(
            f"{r.getMessage()} {getattr(r, 'forge_extra', '')}"
            for r in debug_engine.collector.records
        )
        assert debug_engine.collector.records
        for password in batch.passwords:
            assert password not in text
        assert "Tr0ub4dor&3" not in text
        assert report.length == 11

    def test_operation_field_set(self, debug_engine):
        debug_engine.generate_batch(count=1)
        operations = {getattr(r, "operation", None) for r in debug_engine.collector.records}
        assert "generate_charset" in operations


class TestAnalysis:

    def test_masked_by_default(self, engine):
        assert engine.analyze("secret123").password_masked == "s*******3"

    def test_unmasked_when_configured(self):
        config = ForgeConfig()
        config.analyzer.mask_passwords = False
        assert ForgeEngine(config).analyze("secret123").password_masked == "secret123"

    def test_crack_times_follow_config(self):
        config = ForgeConfig()
        config.analyzer.show_crack_times = False
        assert ForgeEngine(config).analyze("secret123").crack_time_estimates == []

    def test_estimate_entropy(self, engine):
        estimate = engine.estimate_entropy(8, 26)
        assert estimate.entropy_bits == pytest.approx(37.60, abs=0.01)
        assert estimate.strength is StrengthTier.WEAK

    def test_character_set_info(self, engine):
        assert engine.character_set_info().full_set_size == 95
        assert engine.entropy(0, 95) == 0.0
