"""
HashBench Configuration Management
===================================

Centralized configuration for the HashBench toolkit using Python
dataclasses and TOML-based persistence.

Defaults mirror the OWASP Password Storage Cheat Sheet recommendations
for Argon2id and bcrypt so that an empty configuration file already
produces meaningful benchmark numbers.

References:
    - OWASP Password Storage Cheat Sheet (2023).
      https://cheatsheetseries.owasp.org/cheatsheets/Password_Storage_Cheat_Sheet.html
    - RFC 9106 (2021). Argon2 Memory-Hard Function for Password Hashing.
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
    import tomli as tomllib  # type: ignore[no-redef]


# ---------------------------------------------------------------------------
# Default configuration file path relative to the project root
# ---------------------------------------------------------------------------
_DEFAULT_CONFIG_PATH: Path = Path(__file__).resolve().parent.parent / "config.toml"

SALT_PLACEHOLDER = "Optional salt (base64 or text)"


# ========================== Tool-Specific Configs ==========================


@dataclass(frozen=False, slots=True)
class HashBenchConfig:
    """Configuration for the hashing benchmark engine.

    Argon2id parameters are kept as text because they arrive from
    free-text input fields and are parsed leniently at dispatch time.

    Reference:
        Biryukov, A., Dinu, D., & Khovratovich, D. (2016). Argon2:
        New Generation of Memory-Hard Functions. IEEE EuroS&P.
    """

    # Measurement parameters
    timing_iterations: int = 10
    result_decimals: int = 3

    # Algorithm defaults
    bcrypt_cost: int = 10
    argon2_memory: str = "65536"  # KiB (64 MiB)
    argon2_iterations: str = "3"
    argon2_parallelism: str = "2"
    argon2_hash_len: int = 32

    # Presentation
    salt_placeholder: str = SALT_PLACEHOLDER
    error_token: str = "Error"


# =========================== Global Settings ===============================


@dataclass(frozen=False, slots=True)
class GlobalConfig:
    """Global settings: logging verbosity and general behaviour."""

    log_level: str = "INFO"
    log_file: str | None = None
    log_json: bool = False
    console_logging: bool = True
    debug: bool = False
    version: str = "1.0.0"


# =========================== Master Config =================================


@dataclass(frozen=False, slots=True)
class AppConfig:
    """Master configuration aggregating tool-specific and global settings.

    Usage:
        >>> config = AppConfig.load()                  # from default path
        >>> config = AppConfig.load("custom.toml")     # from custom path
        >>> print(config.hashbench.timing_iterations)
        10
    """

    global_settings: GlobalConfig = field(default_factory=GlobalConfig)
    hashbench: HashBenchConfig = field(default_factory=HashBenchConfig)

    # ------------------------------------------------------------------ #
    #  TOML Loading
    # ------------------------------------------------------------------ #

    @classmethod
    def load(cls, path: str | Path | None = None) -> AppConfig:
        """Load configuration from a TOML file.

        If *path* is ``None`` the loader looks for ``config.toml`` in the
        project root.  Missing keys gracefully fall back to dataclass
        defaults -- no ``KeyError`` is raised.

        Args:
            path: Filesystem path to a TOML configuration file.

        Returns:
            A fully-populated :class:`AppConfig` instance.

        Raises:
            FileNotFoundError: If the specified path does not exist
                *and* was explicitly provided by the caller.
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
            hashbench=cls._build_section(HashBenchConfig, raw.get("hashbench", {})),
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialise the entire configuration tree to a plain dictionary."""
        return asdict(self)

    @staticmethod
    def _build_section(cls: type, data: dict[str, Any]) -> Any:
        """Instantiate a dataclass *cls* using only the keys it declares.

        Unknown keys in the TOML source are silently ignored.
        """
        valid_keys = {f.name for f in cls.__dataclass_fields__.values()}  # type: ignore[attr-defined]
        filtered = {k: v for k, v in data.items() if k in valid_keys}
        return cls(**filtered)


# ========================= Module-level convenience ========================

def get_config(path: str | Path | None = None) -> AppConfig:
    """Module-level convenience wrapper around :meth:`AppConfig.load`.

    Caches the result so that repeated calls share one instance.
    """
    if not hasattr(get_config, "_cached") or path is not None:
        get_config._cached = AppConfig.load(path)  # type: ignore[attr-defined]
    return get_config._cached  # type: ignore[attr-defined]
