"""
Configuration management for code generation.

Handles loading and merging configuration from JSON files,
providing defaults and validation for generator settings.
"""

import json
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, Optional, Union

from .errors import ConfigError


@dataclass
class GeneratorConfig:
    """Base configuration for code generators."""

    # Output settings
    output_file: Optional[str] = None

    # Code style settings
    indent_size: int = 4
    use_tabs: bool = False
    line_ending: str = "\n"

    # Documentation comments
    add_comments: bool = True

    # Custom settings (language-specific)
    custom: Dict[str, Any] = field(default_factory=dict)


class ConfigManager:
    """Manages configuration loading and merging."""

    def __init__(self):
        """Initialize configuration manager."""
        self._configs: Dict[str, Dict[str, Any]] = {}
        self._load_defaults()

    def _load_defaults(self):
        """Load default configurations for supported languages."""
        self._configs["typescript"] = {
            "indent_size": 2,
            "use_tabs": False,
            "add_comments": True,
            "custom": {
                "runtime_package": "@aws-sdk/smithy-client",
                "exception_interface": "SmithyException",
                "sensitive_marker": "SENSITIVE_STRING",
                "required_undefined_union": False,
                "optional_null_union": True,
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
        defaults = self._configs.get(language.lower(), {})
        base_config = dict(defaults)
        base_config["custom"] = dict(defaults.get("custom", {}))

        if config_file:
            self._merge(base_config, self._load_config_file(config_file))

        if custom_config:
            self._merge(base_config, custom_config)

        return self._dict_to_config(base_config)

    def _merge(self, base: Dict[str, Any], overrides: Dict[str, Any]) -> None:
        """Merge overrides into base; ``custom`` dicts are merged key by key."""
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
            raise ConfigError(f"Invalid JSON in configuration file {path}: {str(e)}")
        except OSError as e:
            raise ConfigError(f"Failed to load configuration file {path}: {str(e)}")

        if not isinstance(config, dict):
            raise ConfigError(f"Configuration file must contain a JSON object: {path}")

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

        return GeneratorConfig(**config_args)

    def save_config(self, config: GeneratorConfig, output_path: Union[str, Path]):
        """Save configuration to JSON file."""
        path = Path(output_path)

        config_dict = {
            "output_file": config.output_file,
            "indent_size": config.indent_size,
            "use_tabs": config.use_tabs,
            "line_ending": config.line_ending,
            "add_comments": config.add_comments,
        }
        config_dict.update(config.custom)

        try:
            with open(path, 'w', encoding='utf-8') as f:
                json.dump(config_dict, f, indent=2, ensure_ascii=False)
        except OSError as e:
            raise ConfigError(f"Failed to save configuration to {path}: {str(e)}")

    def list_languages(self) -> list[str]:
        """Get list of languages with default configurations."""
        return list(self._configs.keys())

    def validate_config(self, config: GeneratorConfig, language: str) -> list[str]:
        """
        Validate configuration for a language.

        Returns:
            List of validation warnings/errors
        """
        warnings = []

        if not isinstance(config.indent_size, int) or config.indent_size < 0:
            warnings.append(f"Invalid indent_size: {config.indent_size}")

        if config.line_ending not in ("\n", "\r\n"):
            warnings.append(f"Invalid line_ending: {config.line_ending!r}")

        if language.lower() == "typescript":
            for key in ("required_undefined_union", "optional_null_union"):
                value = config.custom.get(key)
                if value is not None and not isinstance(value, bool):
                    warnings.append(f"{key} must be a boolean, got {value!r}")

            interfaces = config.custom.get("interfaces", {})
            if not isinstance(interfaces, dict):
                warnings.append("interfaces must be an object keyed by shape id")

        return warnings


# Global configuration manager instance
_config_manager = None


def get_config_manager() -> ConfigManager:
    """Get the global configuration manager instance."""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager


def load_config(language: str = "typescript", custom_config: Optional[Dict[str, Any]] = None,
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


# Example configuration file for reference
EXAMPLE_TYPESCRIPT_CONFIG = {
    "indent_size": 2,
    "add_comments": True,
    "required_undefined_union": True,
    "interfaces": {
        "smithy.example#GetPersonOutput": [
            {"name": "MetadataBearer", "alias": "$MetadataBearer", "module": "@aws-sdk/types"}
        ]
    },
}
