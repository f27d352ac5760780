"""
Catalogue configuration management with YAML support.

This module provides the configuration dataclass for the catalogue and
utilities for loading it from YAML files and the environment.
"""

import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

import yaml

from catalogue.taxonomy import Category

_TRUE_VALUES = {"1", "true", "yes", "on"}


def _all_categories() -> List[str]:
    return [category.value for category in Category]


@dataclass
class CatalogueConfig:
    """Configuration for the pattern catalogue.

    Attributes:
        log_level: Minimum log level for the "catalogue" logger
        json_logs: Whether console logs are emitted as JSON
        log_file: Optional path for a JSON log file
        use_colors: Whether human-readable logs use ANSI colours
        enabled_categories: Pattern categories exposed by the catalogue
        verbose: Whether demos print their intermediate steps
    """

    log_level: str = "WARNING"
    json_logs: bool = False
    log_file: Optional[str] = None
    use_colors: bool = True
    enabled_categories: List[str] = field(default_factory=_all_categories)
    verbose: bool = False

    def __post_init__(self) -> None:
        # Normalise and validate; raises ValueError on unknown categories
        self.enabled_categories = [
            Category.parse(c).value for c in self.enabled_categories
        ]
        self.log_level = str(self.log_level).upper()

    @property
    def categories(self) -> List[Category]:
        """Enabled categories as enum members."""
        return [Category(value) for value in self.enabled_categories]

    @classmethod
    def from_yaml(cls, path: Path | str) -> "CatalogueConfig":
        """Load catalogue configuration from a YAML file.

        Args:
            path: Path to the YAML configuration file

        Returns:
            CatalogueConfig instance with values from the file

        Raises:
            FileNotFoundError: If the YAML file doesn't exist
            yaml.YAMLError: If the YAML is malformed
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Catalogue config file not found: {path}")

        with open(path, "r", encoding="utf-8") as f:
            data: Dict[str, Any] = yaml.safe_load(f) or {}

        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CatalogueConfig":
        """Create catalogue configuration from a dictionary.

        Args:
            data: Dictionary with configuration values

        Returns:
            CatalogueConfig instance

        Raises:
            ValueError: If the dictionary holds unknown keys
        """
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown configuration keys: {sorted(unknown)}")

        return cls(**data)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to a dictionary.

        Returns:
            Dictionary representation of the configuration
        """
        return {
            "log_level": self.log_level,
            "json_logs": self.json_logs,
            "log_file": self.log_file,
            "use_colors": self.use_colors,
            "enabled_categories": list(self.enabled_categories),
            "verbose": self.verbose,
        }

    def to_yaml(self, path: Path | str) -> None:
        """Save configuration to a YAML file.

        Args:
            path: Path where the YAML file will be saved
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "w", encoding="utf-8") as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False, sort_keys=False)

    def with_env_overrides(
        self, environ: Optional[Mapping[str, str]] = None
    ) -> "CatalogueConfig":
        """Return a copy with values overridden from environment variables.

        Recognised variables: CATALOGUE_LOG_LEVEL, CATALOGUE_JSON_LOGS,
        CATALOGUE_LOG_FILE, CATALOGUE_VERBOSE and CATALOGUE_CATEGORIES
        (comma separated).

        Args:
            environ: Mapping to read from (defaults to os.environ)

        Returns:
            New CatalogueConfig instance
        """
        env = os.environ if environ is None else environ
        data = self.to_dict()

        if env.get("CATALOGUE_LOG_LEVEL"):
            data["log_level"] = env["CATALOGUE_LOG_LEVEL"]
        if env.get("CATALOGUE_JSON_LOGS"):
            data["json_logs"] = env["CATALOGUE_JSON_LOGS"].lower() in _TRUE_VALUES
        if env.get("CATALOGUE_LOG_FILE"):
            data["log_file"] = env["CATALOGUE_LOG_FILE"]
        if env.get("CATALOGUE_VERBOSE"):
            data["verbose"] = env["CATALOGUE_VERBOSE"].lower() in _TRUE_VALUES
        if env.get("CATALOGUE_CATEGORIES"):
            data["enabled_categories"] = [
                c.strip() for c in env["CATALOGUE_CATEGORIES"].split(",") if c.strip()
            ]

        return self.from_dict(data)
