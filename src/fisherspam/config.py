# =============================================================================
# Configuration Management
# =============================================================================
# Handles loading, saving, and validating fisherspam configuration.
#
# XDG Base Directory Compliance (https://specifications.freedesktop.org/basedir-spec/):
#   - Config:  $XDG_CONFIG_HOME/fisherspam/  (default: ~/.config/fisherspam/)
#
# Files:
#   - config.toml: Scoring thresholds, Bayesian prior, tokenizer settings
#
# Only settings live here. The trained FeatureStore is not persisted by
# this package.
# =============================================================================

import logging
import os
import tomllib  # Built into Python 3.11+
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import tomli_w  # For writing TOML (tomllib is read-only)

from fisherspam.spam.scorer import ScoringConfig
from fisherspam.spam.tokenizer import TokenizerConfig

logger = logging.getLogger(__name__)


# =============================================================================
# XDG Directory Management
# =============================================================================

# Application identifier used in XDG paths
APP_NAME = "fisherspam"


def get_xdg_config_home() -> Path:
    """
    Returns the XDG config directory for fisherspam.

    Respects $XDG_CONFIG_HOME if set, otherwise uses ~/.config/fisherspam/
    """
    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        base = Path(xdg_config)
    else:
        base = Path.home() / ".config"
    return base / APP_NAME


# =============================================================================
# Configuration Data Structures
# =============================================================================

@dataclass
class Config:
    """
    Main configuration container for fisherspam.

    Attributes:
        scoring: Thresholds and Bayesian adjustment parameters.
        tokenizer: Tokenizer settings.

    Usage:
        >>> config = Config.load()
        >>> config.scoring.min_spam_score
        0.6
    """
    scoring: ScoringConfig = field(default_factory=ScoringConfig)
    tokenizer: TokenizerConfig = field(default_factory=TokenizerConfig)

    # -------------------------------------------------------------------------
    # File Paths
    # -------------------------------------------------------------------------

    @staticmethod
    def config_file_path() -> Path:
        """Returns the path to the main config file."""
        return get_xdg_config_home() / "config.toml"

    # -------------------------------------------------------------------------
    # Loading and Saving
    # -------------------------------------------------------------------------

    @classmethod
    def load(cls, path: Path | None = None) -> "Config":
        """
        Load configuration from a TOML file.

        If the file doesn't exist, returns default configuration.

        Args:
            path: File to read. Uses the XDG config file if None.

        Returns:
            Loaded Config object.

        Raises:
            ConfigError: If the file exists but is invalid.
        """
        config_path = path or cls.config_file_path()

        if not config_path.exists():
            # No config file yet - return defaults
            logger.debug(f"No config file at {config_path}, using defaults")
            return cls()

        # Load and parse the TOML file
        try:
            with open(config_path, "rb") as f:
                data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid config file: {e}") from e

        logger.info(f"Loaded configuration from {config_path}")
        return cls._from_dict(data)

    def save(self, path: Path | None = None) -> None:
        """
        Save configuration to a TOML file.

        Creates the parent directory if it doesn't exist.

        Args:
            path: File to write. Uses the XDG config file if None.
        """
        config_path = path or self.config_file_path()
        config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(config_path, "wb") as f:
            tomli_w.dump(self._to_dict(), f)

        logger.info(f"Saved configuration to {config_path}")

    @classmethod
    def _from_dict(cls, data: dict[str, Any]) -> "Config":
        """
        Create a Config object from a dictionary (parsed TOML).

        Raises:
            ConfigError: If a value is out of range.
        """
        scoring = data.get("scoring", {})
        tokenizer = data.get("tokenizer", {})

        for name, section in (("scoring", scoring), ("tokenizer", tokenizer)):
            if not isinstance(section, dict):
                raise ConfigError(f"Invalid config file: [{name}] must be a table, got {section!r}")

        try:
            scoring_config = ScoringConfig(
                max_ham_score=scoring.get("max_ham_score", 0.4),
                min_spam_score=scoring.get("min_spam_score", 0.6),
                assumed_probability=scoring.get("assumed_probability", 0.5),
                weight=scoring.get("weight", 1.0),
            )
        except (TypeError, ValueError) as e:
            raise ConfigError(f"Invalid [scoring] section: {e}") from e

        min_token_length = tokenizer.get("min_token_length", 3)
        if type(min_token_length) is not int or min_token_length < 1:
            raise ConfigError(
                f"Invalid [tokenizer] section: min_token_length must be a positive integer, "
                f"got {min_token_length!r}"
            )

        return cls(
            scoring=scoring_config,
            tokenizer=TokenizerConfig(min_token_length=min_token_length),
        )

    def _to_dict(self) -> dict[str, Any]:
        """
        Convert Config to a dictionary for TOML serialization.
        """
        data: dict[str, Any] = {}

        data["scoring"] = {
            "max_ham_score": self.scoring.max_ham_score,
            "min_spam_score": self.scoring.min_spam_score,
            "assumed_probability": self.scoring.assumed_probability,
            "weight": self.scoring.weight,
        }

        data["tokenizer"] = {
            "min_token_length": self.tokenizer.min_token_length,
        }

        return data


# =============================================================================
# Exceptions
# =============================================================================

class ConfigError(Exception):
    """Raised when there's an error loading or parsing configuration."""
    pass
