"""
Configuration manager for the tree engine.
"""

import copy
import os
import json
import logging
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: Dict[str, Dict[str, Any]] = {
    "rendering": {
        # Elements that render as <tag></tag> rather than <tag /> when empty
        "never_self_close": ["div", "a", "script"],
    },
    "selectors": {
        "require_match": False,
    },
    "logging": {
        "console_level": "WARNING",
        "log_file": None,
    },
}


class ConfigManager:
    """
    Manages engine configuration settings.

    Settings are grouped in sections (``rendering``, ``selectors``,
    ``logging``). When a config file is given, its contents are deep-merged
    over the defaults and every change is written back; otherwise the
    configuration lives in memory only.
    """

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialize the configuration manager.

        Args:
            config_file: Optional path of a JSON file backing the settings
        """
        self.config_file = os.path.expanduser(config_file) if config_file else None
        self.default_config = copy.deepcopy(DEFAULT_CONFIG)
        self.memory_config = copy.deepcopy(self.default_config)

        if self.config_file:
            self._load_config()

    @property
    def persistent(self) -> bool:
        return self.config_file is not None

    def get(self, section: str, key: str, default: Any = None) -> Any:
        """
        Get a configuration value from a section.

        Args:
            section: The section name
            key: The configuration key in the section
            default: Default value if key doesn't exist

        Returns:
            The configuration value or default
        """
        if section in self.memory_config and key in self.memory_config[section]:
            return self.memory_config[section][key]
        return default

    def set(self, section: str, key: str, value: Any) -> None:
        """
        Set a configuration value in a section.

        Args:
            section: The section name
            key: The configuration key in the section
            value: The configuration value
        """
        self.memory_config.setdefault(section, {})[key] = value
        logger.debug(f"Config {section}.{key} set to {value!r}")

        if self.persistent:
            self._save_config()

    def get_config(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value (flat key format).

        Args:
            key: The configuration key (format: "section.key")
            default: Default value if key doesn't exist

        Returns:
            The configuration value or default
        """
        if "." in key:
            section, subkey = key.split(".", 1)
            return self.get(section, subkey, default)

        # Look for key in all sections
        for section in self.memory_config.values():
            if key in section:
                return section[key]

        return default

    def set_config(self, key: str, value: Any) -> None:
        """
        Set a configuration value (flat key format).

        Args:
            key: The configuration key (format: "section.key")
            value: The configuration value
        """
        if "." not in key:
            raise KeyError(f"Configuration key {key!r} must be of the form 'section.key'")
        section, subkey = key.split(".", 1)
        self.set(section, subkey, value)

    def reset_to_defaults(self) -> None:
        """Reset configuration to default values."""
        self.memory_config = copy.deepcopy(self.default_config)

        if self.persistent:
            self._save_config()

    def _load_config(self) -> None:
        """Load configuration from disk."""
        try:
            if os.path.exists(self.config_file):
                with open(self.config_file, 'r', encoding='utf-8') as f:
                    disk_config = json.load(f)

                self.memory_config = self._deep_merge(copy.deepcopy(self.default_config), disk_config)
            else:
                # Create default config file
                self.memory_config = copy.deepcopy(self.default_config)
                self._save_config()
        except (OSError, ValueError) as e:
            logger.error(f"Error loading configuration from {self.config_file}: {e}")
            # Use defaults if there's an error
            self.memory_config = copy.deepcopy(self.default_config)

    def _deep_merge(self, target: Dict, source: Dict) -> Dict:
        """
        Deep merge two dictionaries.

        Args:
            target: Target dictionary to merge into
            source: Source dictionary to merge from

        Returns:
            Merged dictionary
        """
        for key, value in source.items():
            if key in target and isinstance(target[key], dict) and isinstance(value, dict):
                self._deep_merge(target[key], value)
            else:
                target[key] = value
        return target

    def _save_config(self) -> None:
        """Save configuration to disk."""
        if not self.persistent:
            return

        try:
            config_dir = os.path.dirname(self.config_file)
            if config_dir:
                os.makedirs(config_dir, exist_ok=True)

            with open(self.config_file, 'w', encoding='utf-8') as f:
                json.dump(self.memory_config, f, indent=2)
        except OSError as e:
            logger.error(f"Error saving configuration to {self.config_file}: {e}")

    def save(self) -> None:
        """Save configuration to disk (alias for _save_config)."""
        self._save_config()

    def import_config(self, file_path: str) -> bool:
        """
        Import configuration from a file.

        Args:
            file_path: Path to the configuration file

        Returns:
            True if import succeeded, False otherwise
        """
        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                imported_config = json.load(f)
        except (OSError, ValueError) as e:
            logger.error(f"Error importing configuration: {e}")
            return False

        if not isinstance(imported_config, dict):
            logger.error("Invalid configuration format")
            return False

        self.memory_config = self._deep_merge(self.memory_config, imported_config)

        if self.persistent:
            self._save_config()

        return True

    def export_config(self, file_path: str) -> bool:
        """
        Export configuration to a file.

        Args:
            file_path: Path to save the configuration

        Returns:
            True if export succeeded, False otherwise
        """
        try:
            with open(file_path, 'w', encoding='utf-8') as f:
                json.dump(self.memory_config, f, indent=2)
            return True
        except OSError as e:
            logger.error(f"Error exporting configuration: {e}")
            return False


_default_config: Optional[ConfigManager] = None


def get_default_config() -> ConfigManager:
    """Return the process-wide, in-memory configuration."""
    global _default_config
    if _default_config is None:
        _default_config = ConfigManager()
    return _default_config
