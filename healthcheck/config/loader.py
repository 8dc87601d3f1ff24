"""
Configuration loader for the report settings file.

Handles loading and validation of the optional YAML presentation settings.
"""

from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from pydantic import ValidationError

from .models import ReportSettings


class ConfigError(Exception):
    """Configuration loading or validation error."""
    pass


class ConfigLoader:
    """
    Loads and validates report settings from a YAML file.

    The file is optional: without a path the defaults are used.
    """

    def __init__(self, config_path: Optional[Union[str, Path]] = None):
        """
        Initialize the config loader.

        Args:
            config_path: Path to the YAML settings file
        """
        self.config_path = Path(config_path) if config_path else None
        self._report: Optional[ReportSettings] = None

    def load(self) -> "ConfigLoader":
        """
        Load the settings file.

        Returns:
            Self for method chaining

        Raises:
            ConfigError: If the file is missing, unreadable or invalid
        """
        if self.config_path is None:
            raise ConfigError("No configuration path specified")

        try:
            is_file = self.config_path.is_file()
        except OSError as e:
            raise ConfigError(f"Cannot access {self.config_path}: {e}")
        if not is_file:
            raise ConfigError(f"Configuration file not found or not a file: {self.config_path}")

        data = self._read_yaml(self.config_path)
        self._report = self._parse_report(data)
        return self

    def _read_yaml(self, file_path: Path) -> Dict[str, Any]:
        """Read and parse a YAML file."""
        try:
            with open(file_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {file_path}: {e}")
        except UnicodeDecodeError as e:
            raise ConfigError(f"{file_path} is not valid UTF-8: {e}")
        except OSError as e:
            raise ConfigError(f"Cannot read {file_path}: {e}")

        if not isinstance(data, dict):
            raise ConfigError(f"Expected a mapping at the top level of {file_path}")

        # Allow either a bare mapping or one nested under "report"
        return data.get("report", data)

    def _parse_report(self, data: Dict[str, Any]) -> ReportSettings:
        """Parse report settings."""
        try:
            return ReportSettings(**data)
        except (ValidationError, TypeError) as e:
            raise ConfigError(f"Invalid report configuration: {e}")

    @property
    def report(self) -> ReportSettings:
        """Get loaded report settings, or defaults if nothing was loaded."""
        return self._report or ReportSettings()

    @classmethod
    def from_dict(cls, report: Optional[Dict[str, Any]] = None) -> "ConfigLoader":
        """
        Create a ConfigLoader from a dictionary.

        Useful for programmatic configuration.
        """
        loader = cls()
        if report:
            loader._report = loader._parse_report(report)
        return loader
