"""
Configuration management for code generation.

Handles loading and merging configuration from JSON files,
providing defaults and validation for generator settings.
"""

import json
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, Optional, Union

from ...logging_config import get_logger

logger = get_logger(__name__)


class ConfigError(Exception):
    """Exception raised for configuration-related errors."""
    pass


@dataclass
class GeneratorConfig:
    """Base configuration for code generators."""

    # Output settings
    output_file: Optional[str] = None
    module_name: str = "types"

    # Code style settings
    indent_size: int = 4
    use_tabs: bool = False
    line_ending: str = "\n"

    # Naming settings
    type_case: str = "pascal"
    variant_case: str = "pascal"  # pascal, camel, snake, screaming_snake

    # Additional metadata
    add_comments: bool = True
    add_header: bool = True

    # Custom settings (language-specific)
    custom: Dict[str, Any] = field(default_factory=dict)


VALID_CASES = {"pascal", "camel", "snake", "screaming_snake"}


class ConfigManager:
    """Manages configuration loading and merging."""

    def __init__(self):
        """Initialize configuration manager."""
        self._configs: Dict[str, Dict[str, Any]] = {}
        self._load_defaults()

    def _load_defaults(self):
        """Load default configurations for supported languages."""
        # Rust defaults
        self._configs["rust"] = {
            "module_name": "types",
            "type_case": "pascal",
            "variant_case": "pascal",
            "add_comments": True,
            "custom": {
                "derives": [
                    "Clone",
                    "Debug",
                    "Eq",
                    "Hash",
                    "Ord",
                    "PartialEq",
                    "PartialOrd",
                ],
                "visibility": "pub",
            },
        }

        # Python defaults
        self._configs["python"] = {
            "module_name": "types",
            "type_case": "pascal",
            "variant_case": "screaming_snake",
            "add_comments": True,
            "custom": {
                "decorators": ["final"],
            },
        }

    def get_config(self, language: str, custom_config: Optional[Dict[str, Any]] = None,
                   config_file: Optional[Union[str, Path]] = None) -> GeneratorConfig:
        """
        Get complete configuration for a language.

        Args:
            language: Target language name
            custom_config: Custom configuration overrides
            config_file: Path to JSON configuration file

        Returns:
            Merged configuration for the language
        """
        # Start with defaults (deep enough to keep the defaults pristine)
        defaults = self._configs.get(language, {})
        base_config = dict(defaults)
        base_config["custom"] = dict(defaults.get("custom", {}))

        # Load from file if provided
        if config_file:
            file_config = self._load_config_file(config_file)
            self._merge(base_config, file_config)

        # Apply custom overrides
        if custom_config:
            self._merge(base_config, custom_config)

        return self._dict_to_config(base_config)

    def _merge(self, base: Dict[str, Any], overrides: Dict[str, Any]):
        """Merge overrides into base, combining custom sections."""
        for key, value in overrides.items():
            if key == "custom" and isinstance(value, dict):
                base.setdefault("custom", {}).update(value)
            else:
                base[key] = value

    def _load_config_file(self, config_path: Union[str, Path]) -> Dict[str, Any]:
        """Load configuration from JSON file."""
        path = Path(config_path)

        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")

        if not path.suffix.lower() == '.json':
            raise ConfigError(f"Configuration file must be JSON: {path}")

        try:
            with open(path, 'r', encoding='utf-8') as f:
                config = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in configuration file {path}: {str(e)}") from e
        except OSError as e:
            raise ConfigError(f"Failed to load configuration file {path}: {str(e)}") from e

        if not isinstance(config, dict):
            raise ConfigError(f"Configuration file must contain a JSON object: {path}")

        logger.debug("Loaded configuration from %s", path)
        return config

    def _dict_to_config(self, config_dict: Dict[str, Any]) -> GeneratorConfig:
        """Convert dictionary to GeneratorConfig instance."""
        known_fields = {f.name for f in fields(GeneratorConfig)}

        config_args = {}
        custom_args = {}

        for key, value in config_dict.items():
            if key in known_fields:
                config_args[key] = value
            else:
                custom_args[key] = value

        # Unknown keys are language-specific settings
        if custom_args:
            existing_custom = dict(config_args.get('custom', {}))
            existing_custom.update(custom_args)
            config_args['custom'] = existing_custom

        config = GeneratorConfig(**config_args)
        check_config(config)
        return config


def check_config(config: GeneratorConfig):
    """
    Reject settings that would make generators emit invalid code.

    Raises:
        ConfigError: If a naming case or the indentation is invalid
    """
    for setting in ("type_case", "variant_case"):
        value = getattr(config, setting)
        if value not in VALID_CASES:
            raise ConfigError(
                f"Invalid {setting}: {value!r} "
                f"(expected one of: {', '.join(sorted(VALID_CASES))})"
            )

    if config.indent_size < 1:
        raise ConfigError(f"Invalid indent_size: {config.indent_size}")


# Global configuration manager instance
_config_manager = None


def get_config_manager() -> ConfigManager:
    """Get the global configuration manager instance."""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager


def load_config(language: str = "rust", custom_config: Optional[Dict[str, Any]] = None,
                config_file: Optional[Union[str, Path]] = None) -> GeneratorConfig:
    """
    Convenience function to load configuration.

    Args:
        language: Target language name
        custom_config: Custom configuration overrides
        config_file: Path to JSON configuration file

    Returns:
        Merged configuration for the language
    """
    manager = get_config_manager()
    return manager.get_config(language, custom_config, config_file)
