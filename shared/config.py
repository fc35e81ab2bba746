"""
Rampart Configuration Management
=================================

Centralized configuration for Rampart using Python dataclasses and
TOML-based persistence.

Architecture follows the Twelve-Factor App methodology for configuration
management (Wiggins, 2011), separating config from code.

References:
    - Wiggins, A. (2011). The Twelve-Factor App. https://12factor.net/
    - PEP 681 -- Data Class Transforms (2022).
    - TOML v1.0.0 Specification. https://toml.io/en/v1.0.0
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Any, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[no-redef]


# ---------------------------------------------------------------------------
# Default configuration file path relative to the Rampart root
# ---------------------------------------------------------------------------
_DEFAULT_CONFIG_PATH: Path = Path(__file__).resolve().parent.parent / "rampart.toml"

HASH_USES = ("collision", "pre-image")


# ========================== Assessment Defaults ============================


@dataclass(frozen=False, slots=True)
class AssessConfig:
    """Default assessment parameters.

    Values given on the command line override these.

    Reference:
        NIST SP 800-57 Part 1 Rev. 5 (2020), Section 5.6.
    """

    standard: str = "nist"
    security: int = 128
    year: Optional[int] = None  # None = present year
    hash_use: str = "collision"

    def __post_init__(self) -> None:
        if self.security <= 0:
            raise ValueError(f"assess.security must be positive, got {self.security}")
        if self.hash_use not in HASH_USES:
            raise ValueError(
                f"assess.hash_use must be one of {HASH_USES}, got {self.hash_use!r}"
            )


# =========================== Global Settings ===============================


@dataclass(frozen=False, slots=True)
class GlobalConfig:
    """Global settings: logging verbosity, output directory and report format."""

    log_level: str = "WARNING"
    log_file: str = ""  # empty disables file logging
    log_json: bool = False
    output_dir: str = "output"
    report_format: str = "html"
    version: str = "1.0.0"


# =========================== Master Config =================================


@dataclass(frozen=False, slots=True)
class RampartConfig:
    """Master configuration aggregating global and assessment settings.

    Usage:
        >>> config = RampartConfig.load()                  # from default path
        >>> config = RampartConfig.load("custom.toml")     # from custom path
        >>> print(config.assess.standard)
        'nist'
    """

    global_settings: GlobalConfig = field(default_factory=GlobalConfig)
    assess: AssessConfig = field(default_factory=AssessConfig)

    # ------------------------------------------------------------------ #
    #  TOML Loading
    # ------------------------------------------------------------------ #

    @classmethod
    def load(cls, path: str | Path | None = None) -> RampartConfig:
        """Load configuration from a TOML file.

        If *path* is ``None`` the loader looks for ``rampart.toml`` in the
        project root.  Missing keys gracefully fall back to dataclass
        defaults -- no ``KeyError`` is raised.

        Args:
            path: Filesystem path to a TOML configuration file.
                  Defaults to ``<project_root>/rampart.toml``.

        Returns:
            A fully-populated :class:`RampartConfig` instance.

        Raises:
            FileNotFoundError: If the specified path does not exist
                *and* was explicitly provided by the caller.
            ValueError: If a section holds an invalid value.
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
            assess=cls._build_section(AssessConfig, raw.get("assess", {})),
        )

    # ------------------------------------------------------------------ #
    #  Serialisation helpers
    # ------------------------------------------------------------------ #

    def to_dict(self) -> dict[str, Any]:
        """Serialise the entire configuration tree to a plain dictionary."""
        return asdict(self)

    # ------------------------------------------------------------------ #
    #  Internal helpers
    # ------------------------------------------------------------------ #

    @staticmethod
    def _build_section(cls: type, data: dict[str, Any]) -> Any:
        """Instantiate a dataclass *cls* using only the keys it declares.

        Unknown keys in the TOML source are silently ignored so that
        forward-compatible config files do not break older code.
        """
        valid_keys = {f.name for f in cls.__dataclass_fields__.values()}  # type: ignore[attr-defined]
        filtered = {k: v for k, v in data.items() if k in valid_keys}
        return cls(**filtered)


# ========================= Module-level convenience ========================

def get_config(path: str | Path | None = None) -> RampartConfig:
    """Module-level convenience wrapper around :meth:`RampartConfig.load`.

    Caches the result so that repeated imports share one instance.
    """
    if not hasattr(get_config, "_cached") or path is not None:
        get_config._cached = RampartConfig.load(path)  # type: ignore[attr-defined]
    return get_config._cached  # type: ignore[attr-defined]
