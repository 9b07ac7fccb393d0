import json
import logging
import os
from typing import Any, Dict, Optional

import toml
import yaml

from ..api.exceptions import ConfigurationError

MATCH_MODES = ("all", "any")


def read_structured_file(file_path: str) -> Dict[str, Any]:
    """Parse a TOML, YAML or JSON file into a dictionary.

    Raises:
        FileNotFoundError: if ``file_path`` does not exist
        ConfigurationError: on an unsupported extension, an unreadable path
            (directory, no permission) or content that is not valid UTF-8 / TOML /
            YAML / JSON
    """
    if not os.path.exists(file_path):
        raise FileNotFoundError(f"No such file: {file_path}")
    _, ext = os.path.splitext(file_path)
    ext = ext.lower()
    try:
        with open(file_path, "r", encoding="utf-8") as f:
            if ext == ".toml":
                data = toml.load(f)
            elif ext in (".yml", ".yaml"):
                data = yaml.safe_load(f)
            elif ext == ".json":
                data = json.load(f)
            else:
                raise ConfigurationError(
                    f"Unsupported file extension: {ext} for file {file_path}"
                )
    except (IsADirectoryError, PermissionError) as e:
        raise ConfigurationError(f"Could not read {file_path}: {e}") from e
    except (UnicodeDecodeError, toml.TomlDecodeError, yaml.YAMLError, json.JSONDecodeError) as e:
        raise ConfigurationError(f"Could not parse {file_path}: {e}") from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Expected a table/mapping at the top of {file_path}, got {type(data).__name__}"
        )
    return data


class ConfigManager:
    """Handles loading and accessing configuration from TOML, YAML or JSON files."""

    def __init__(
        self,
        config_file_path: Optional[str] = None,
        config_dir: str = "config",
        config_name: str = "config",
        config_data: Optional[Dict[str, Any]] = None,
    ):
        """
        Initialize ConfigManager.

        Args:
            config_file_path: Direct path to a config file.
            config_dir: Directory containing config files (used if config_file_path is None).
            config_name: Base name of config file (without extension, used if config_file_path is None).
            config_data: Already-parsed settings; skips the need for load_config.
        """
        self.config_file_path = config_file_path
        self.config_dir = config_dir
        self.config_name = config_name
        self.config_data: Dict[str, Any] = dict(config_data or {})
        self.logger = logging.getLogger(__name__)

    def validate_match_mode(self) -> None:
        """
        Validate that filter.match, if present, is 'all' or 'any'.

        Raises:
            ConfigurationError: If the value is anything else
        """
        mode = self.get_param("filter.match")
        if mode is None:
            return
        if mode not in MATCH_MODES:
            raise ConfigurationError(
                f"filter.match must be one of {', '.join(MATCH_MODES)}, got {mode!r}"
            )
        self.logger.debug("Validated filter.match: %s", mode)

    def load_config(self) -> None:
        """Load configuration from the specified file path or search in the config directory."""
        if self.config_file_path:
            if not os.path.exists(self.config_file_path):
                raise FileNotFoundError(f"Config file not found: {self.config_file_path}")
            self.config_data = read_structured_file(self.config_file_path)
            if not self.config_data:
                raise ConfigurationError(
                    f"Config file found at {self.config_file_path} but is empty."
                )
            self.validate_match_mode()
            return

        paths_searched = [
            os.path.join(self.config_dir, f"{self.config_name}{ext}")
            for ext in (".toml", ".yml", ".json")
        ]
        for path in paths_searched:
            if os.path.exists(path):
                self.config_data = read_structured_file(path)
                self.config_file_path = path
                break
        else:
            raise FileNotFoundError(
                f"No config file found. Searched at: {', '.join(paths_searched)}"
            )
        self.validate_match_mode()

    def get_param(self, key: str, default: Optional[Any] = None) -> Any:
        """
        Get configuration parameter by dot notation key.

        Args:
            key: Dot notation key (e.g. 'logging.level')
            default: Default value if key not found

        Returns:
            The configuration value or default if not found
        """
        current: Any = self.config_data
        for k in key.split("."):
            if not isinstance(current, dict) or k not in current:
                return default
            current = current[k]
        return current

    def set_param(self, key: str, value: Any) -> None:
        """Set a parameter by dot notation key, creating intermediate tables."""
        keys = key.split(".")
        current = self.config_data
        for k in keys[:-1]:
            current = current.setdefault(k, {})
        current[keys[-1]] = value
