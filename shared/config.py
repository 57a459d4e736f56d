"""
PassForge Configuration Management
===================================

Centralized configuration for the PassForge toolkit using Python
dataclasses and TOML-based persistence.

Every section falls back to sensible defaults, so a configuration file is
optional. Only the keys a section declares are read; anything else in the
TOML source is ignored.

References:
    - Wiggins, A. (2011). The Twelve-Factor App. https://12factor.net/
    - TOML v1.0.0 Specification. https://toml.io/en/v1.0.0
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Any

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib


# ---------------------------------------------------------------------------
# Default configuration file path relative to the project root
# ---------------------------------------------------------------------------
_DEFAULT_CONFIG_PATH: Path = Path(__file__).resolve().parent.parent / "passforge.toml"


# ========================== Section Configs ================================


@dataclass(frozen=False, slots=True)
class GeneratorConfig:
    """Defaults applied when a caller omits generation parameters.

    Lengths and counts are still clamped by the generators themselves,
    so out-of-range values here are harmless.
    """

    default_length: int = 16
    default_count: int = 10
    pronounceable_length: int = 12
    include_uppercase: bool = True
    include_lowercase: bool = True
    include_numbers: bool = True
    include_symbols: bool = True


@dataclass(frozen=False, slots=True)
class AnalyzerConfig:
    """Presentation settings for password strength reports."""

    mask_passwords: bool = True
    show_crack_times: bool = True


@dataclass(frozen=False, slots=True)
class GlobalConfig:
    """Global settings: logging verbosity and log files."""

    log_level: str = "WARNING"
    log_file: str | None = None
    log_json: bool = False
    debug: bool = False


# =========================== Master Config =================================


@dataclass(frozen=False, slots=True)
class ForgeConfig:
    """Master configuration aggregating all sections.

    Usage:
        >>> config = ForgeConfig.load()                    # from default path
        >>> config = ForgeConfig.load("custom.toml")       # from custom path
        >>> config.generator.default_length
        16
    """

    global_settings: GlobalConfig = field(default_factory=GlobalConfig)
    generator: GeneratorConfig = field(default_factory=GeneratorConfig)
    analyzer: AnalyzerConfig = field(default_factory=AnalyzerConfig)

    @classmethod
    def load(cls, path: str | Path | None = None) -> ForgeConfig:
        """Load configuration from a TOML file.

        If *path* is ``None`` the loader looks for ``passforge.toml`` in the
        project root and silently falls back to defaults when it is absent.

        Args:
            path: Filesystem path to a TOML configuration file.

        Returns:
            A fully-populated :class:`ForgeConfig` instance.

        Raises:
            FileNotFoundError: If an explicitly provided path does not exist.
        """
        config_path = Path(path) if path is not None else _DEFAULT_CONFIG_PATH

        if not config_path.exists():
            if path is not None:
                raise FileNotFoundError(
                    f"Configuration file not found: {config_path}"
                )
            return cls()

        with open(config_path, "rb") as fh:
            raw: dict[str, Any] = tomllib.load(fh)

        return cls(
            global_settings=cls._build_section(GlobalConfig, raw.get("global", {})),
            generator=cls._build_section(GeneratorConfig, raw.get("generator", {})),
            analyzer=cls._build_section(AnalyzerConfig, raw.get("analyzer", {})),
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialise the entire configuration tree to a plain dictionary."""
        return asdict(self)

    @staticmethod
    def _build_section(cls: type, data: dict[str, Any]) -> Any:
        """Instantiate dataclass *cls* using only the keys it declares."""
        valid_keys = {f.name for f in cls.__dataclass_fields__.values()}  # type: ignore[attr-defined]
        filtered = {k: v for k, v in data.items() if k in valid_keys}
        return cls(**filtered)


def get_config(path: str | Path | None = None) -> ForgeConfig:
    """Module-level convenience wrapper around :meth:`ForgeConfig.load`.

    Caches the result so that repeated calls share one instance.
    """
    if not hasattr(get_config, "_cached") or path is not None:
        get_config._cached = ForgeConfig.load(path)  # type: ignore[attr-defined]
    return get_config._cached  # type: ignore[attr-defined]
