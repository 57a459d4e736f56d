"""
Tests for the Library API
=========================
Tests for the module-level functions re-exported by the passforge package.
"""

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import passforge
from passforge.core import charsets


class TestGeneration:

    def test_generate_default(self):
        password = passforge.generate()
        assert len(password) == 16
        assert set(password) <= set(charsets.FULL)

    def test_generate_without_symbols(self):
        password = passforge.generate(40, include_symbols=False)
        assert set(password) <= set(charsets.ALPHANUMERIC)

    def test_generate_from_pool(self):
        assert passforge.generate_from_pool(10, "A") == "A" * 10
        assert len(passforge.generate_from_pool(10, "")) == 10

    def test_generate_pronounceable(self):
        password = passforge.generate_pronounceable()
        assert len(password) == 12
        assert password[-2:].isdigit()

    def test_generate_multiple_clamps_count(self):
        assert len(passforge.generate_multiple(0)) == 1
        assert len(passforge.generate_multiple(1500, 4)) == 1000

    def test_generate_multiple_distinct(self):
        assert len(set(passforge.generate_multiple(50))) == 50

    def test_generate_multiple_from_pool(self):
        passwords = passforge.generate_multiple_from_pool(3, 8, "xy")
        assert len(passwords) == 3
        assert all(set(p) <= {"x", "y"} for p in passwords)

    def test_generate_multiple_pronounceable(self):
        passwords = passforge.generate_multiple_pronounceable(4, 8, include_numbers=False)
        assert len(passwords) == 4
        assert all(len(p) == 8 and p.isalpha() for p in passwords)


class TestAnalysis:

    def test_entropy(self):
        assert passforge.entropy(1, 2) == 1.0
        assert passforge.entropy(0, 0) == 0.0

    def test_classify(self):
        assert passforge.classify(80.0) is passforge.StrengthTier.VERY_STRONG
        assert passforge.classify(29.99) is passforge.StrengthTier.VERY_WEAK

    def test_character_set_info(self):
        assert passforge.character_set_info().full_set_size == 95

    def test_analyze(self):
        result = passforge.analyze("Kj9#mP$2vX@z")
        assert isinstance(result, passforge.PasswordAnalysis)
        assert result.strength is passforge.StrengthTier.STRONG
        assert result.password_masked == "K**********z"

    def test_package_metadata(self):
        assert passforge.__version__ == "1.0.0"
        assert issubclass(passforge.RandomSourceError, RuntimeError)
