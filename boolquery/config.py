"""Configuration management for boolquery."""

from __future__ import annotations

import re
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import tomli_w

from boolquery.exceptions import (
    ConfigParseError,
    ConfigValidationError,
)
from boolquery.text.normalizer import DEFAULT_STRIP_PATTERN, BasicTermNormalizer


def get_default_config_path() -> Path:
    """Get the default configuration file path."""
    return Path.home() / ".config" / "boolquery" / "config.toml"


@dataclass
class Config:
    """Application configuration.

    Attributes:
        colored_output: Whether to use colored terminal output.
        lowercase: Fold normalized terms to lowercase.
        strip_pattern: Regex removed from every token during normalization.
        config_path: Path where config was loaded from (None if defaults).
    """

    colored_output: bool = True
    lowercase: bool = True
    strip_pattern: str = DEFAULT_STRIP_PATTERN
    config_path: Path | None = field(default=None, compare=False)

    def validate(self) -> list[str]:
        """Validate configuration values.

        Returns:
            List of warning messages for non-fatal issues.

        Raises:
            ConfigValidationError: If a critical validation fails.
        """
        warnings: list[str] = []

        try:
            re.compile(self.strip_pattern)
        except re.error as e:
            raise ConfigValidationError(
                "normalizer.strip_pattern", self.strip_pattern, f"invalid regex: {e}"
            ) from e

        if not self.strip_pattern:
            warnings.append("normalizer.strip_pattern is empty; tokens are kept verbatim")

        return warnings

    def build_normalizer(self) -> BasicTermNormalizer:
        """Create the term normalizer described by this configuration."""
        return BasicTermNormalizer(lowercase=self.lowercase, strip_pattern=self.strip_pattern)


def load_config(config_path: Path | None = None) -> tuple[Config, list[str]]:
    """Load configuration from file or use defaults.

    Args:
        config_path: Explicit config file path. If None, uses default location.

    Returns:
        Tuple of (Config object, list of warning messages).

    Raises:
        ConfigParseError: If config file exists but has invalid syntax.
        ConfigValidationError: If config values are invalid.
    """
    warnings: list[str] = []

    if config_path is None:
        config_path = get_default_config_path()

    config_path = config_path.expanduser().resolve()

    if not config_path.exists():
        # Use defaults
        config = Config()
        warnings.append(
            f"No config file found at {config_path}. Using defaults. "
            f"Create config with: boolquery init-config"
        )
        config_warnings = config.validate()
        return config, warnings + config_warnings

    # Load from file
    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(config_path, str(e)) from e

    config = _parse_config_dict(data, config_path)
    config_warnings = config.validate()

    return config, warnings + config_warnings


def _parse_config_dict(data: dict[str, Any], config_path: Path) -> Config:
    """Parse configuration dictionary into Config object."""
    config = Config(config_path=config_path)

    # Parse [display] section
    display = data.get("display", {})
    if "colored_output" in display:
        value = display["colored_output"]
        if not isinstance(value, bool):
            raise ConfigValidationError("display.colored_output", value, "must be a boolean")
        config.colored_output = value

    # Parse [normalizer] section
    normalizer = data.get("normalizer", {})
    if "lowercase" in normalizer:
        value = normalizer["lowercase"]
        if not isinstance(value, bool):
            raise ConfigValidationError("normalizer.lowercase", value, "must be a boolean")
        config.lowercase = value

    if "strip_pattern" in normalizer:
        value = normalizer["strip_pattern"]
        if not isinstance(value, str):
            raise ConfigValidationError("normalizer.strip_pattern", value, "must be a string")
        config.strip_pattern = value

    return config


def save_config(config: Config, config_path: Path | None = None) -> Path:
    """Save configuration to a TOML file.

    Only values that differ from the defaults are written to the
    [normalizer] section.

    Returns:
        The path that was written.
    """
    if config_path is None:
        config_path = config.config_path or get_default_config_path()

    config_path = config_path.expanduser()

    # Ensure directory exists
    config_path.parent.mkdir(parents=True, exist_ok=True)

    # Build TOML structure
    data: dict[str, Any] = {
        "display": {
            "colored_output": config.colored_output,
        },
    }

    normalizer_data: dict[str, Any] = {}
    if not config.lowercase:
        normalizer_data["lowercase"] = False
    if config.strip_pattern != DEFAULT_STRIP_PATTERN:
        normalizer_data["strip_pattern"] = config.strip_pattern
    if normalizer_data:
        data["normalizer"] = normalizer_data

    with open(config_path, "wb") as f:
        tomli_w.dump(data, f)

    return config_path
