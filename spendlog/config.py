"""Configuration file management for spendlog.

The config only holds display preferences; expenses are never saved.
"""

import os
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any, cast

import tomli_w

from spendlog.domain.expenses import SummarySort

SUMMARY_SORTS = ("alpha", "value", "insertion")


class ConfigError(Exception):
    """Config file exists but cannot be used."""


@dataclass(frozen=True)
class Settings:
    """Display settings."""

    currency_symbol: str = "$"
    summary_sort: SummarySort = "alpha"


def get_xdg_config_home() -> Path:
    """Get XDG config directory, with fallback to ~/.config."""
    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        return Path(xdg_config)
    return Path.home() / ".config"


def get_config_path() -> Path:
    """Get the config file path (XDG compliant).

    Returns:
        Path to the config file.
    """
    return get_xdg_config_home() / "spendlog" / "config.toml"


def default_config() -> dict[str, Any]:
    """Build the default config dictionary from Settings defaults."""
    defaults = Settings()
    return {
        "display": {
            "currency_symbol": defaults.currency_symbol,
            "summary_sort": defaults.summary_sort,
        },
    }


def create_default_config(config_path: Path | None = None) -> None:
    """Create default config file with secure permissions.

    Args:
        config_path: Path to config file. If None, uses default location.
    """
    if config_path is None:
        config_path = get_config_path()

    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, "wb") as f:
        tomli_w.dump(default_config(), f)

    os.chmod(config_path, 0o600)


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """Load configuration from TOML file.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        Configuration dictionary.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        ConfigError: If the file is not valid TOML.
    """
    if config_path is None:
        config_path = get_config_path()

    with open(config_path, "rb") as f:
        try:
            return tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"{config_path}: {e}") from e


def parse_settings(config: dict[str, Any]) -> Settings:
    """Build Settings from a config dictionary.

    Missing keys fall back to defaults.

    Raises:
        ConfigError: If a value has the wrong type or an unknown summary sort.
    """
    display = config.get("display", {})
    if not isinstance(display, dict):
        raise ConfigError("[display] must be a table")

    defaults = Settings()
    symbol = display.get("currency_symbol", defaults.currency_symbol)
    sort = display.get("summary_sort", defaults.summary_sort)

    if not isinstance(symbol, str):
        raise ConfigError("display.currency_symbol must be a string")
    if sort not in SUMMARY_SORTS:
        raise ConfigError(f"display.summary_sort must be one of {', '.join(SUMMARY_SORTS)}")

    return Settings(currency_symbol=symbol, summary_sort=cast(SummarySort, sort))


def load_settings(config_path: Path | None = None) -> Settings:
    """Load display settings, using defaults when no config file exists.

    Args:
        config_path: Path to config file. If None, uses default location.

    Raises:
        ConfigError: If the config file is invalid.
    """
    try:
        config = load_config(config_path)
    except FileNotFoundError:
        return Settings()
    return parse_settings(config)
