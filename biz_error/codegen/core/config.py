"""
Configuration management for error-catalog compilation.

Handles loading and merging configuration from JSON files,
providing defaults and validation for compiler settings.
"""

import json
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, List, Optional, Union


class ConfigError(Exception):
    """Exception raised for configuration-related errors."""

    pass


@dataclass
class CompilerConfig:
    """Configuration for the error-catalog compiler."""

    # Output settings
    output_file: Optional[str] = None

    # Generated names
    enum_name: str = "ErrorCode"
    all_codes_name: str = "ALL_CODES"

    # Code style settings
    indent_size: int = 4
    line_ending: str = "\n"
    add_comments: bool = True

    # Validation strictness
    require_default_message: bool = False  # Missing default-language text is an error
    unique_codes: bool = False  # Two entries may not share a numeric code

    # Language-specific settings
    language_config: Dict[str, Any] = field(default_factory=dict)


class ConfigManager:
    """Manages configuration loading and merging."""

    def __init__(self):
        """Initialize configuration manager."""
        self._defaults: Dict[str, Any] = asdict(CompilerConfig())

    def get_config(
        self,
        custom_config: Optional[Dict[str, Any]] = None,
        config_file: Optional[Union[str, Path]] = None,
    ) -> CompilerConfig:
        """
        Get complete compiler configuration.

        Args:
            custom_config: Custom configuration overrides
            config_file: Path to JSON configuration file

        Returns:
            Merged configuration
        """
        # Start with defaults
        base_config = dict(self._defaults)
        base_config["language_config"] = {}

        # Load from file if provided
        if config_file:
            base_config.update(self._load_config_file(config_file))

        # Apply custom overrides
        if custom_config:
            base_config.update(custom_config)

        return self._dict_to_config(base_config)

    def _load_config_file(self, config_path: Union[str, Path]) -> Dict[str, Any]:
        """Load configuration from JSON file."""
        path = Path(config_path)

        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")

        if not path.suffix.lower() == ".json":
            raise ConfigError(f"Configuration file must be JSON: {path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                config = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in configuration file {path}: {e}") from e
        except OSError as e:
            raise ConfigError(f"Failed to load configuration file {path}: {e}") from e

        if not isinstance(config, dict):
            raise ConfigError(f"Configuration file must contain a JSON object: {path}")

        return config

    def _dict_to_config(self, config_dict: Dict[str, Any]) -> CompilerConfig:
        """Convert dictionary to CompilerConfig instance."""
        known_fields = {f.name for f in fields(CompilerConfig)}

        config_args = {}
        language_args = {}

        for key, value in config_dict.items():
            if key in known_fields:
                config_args[key] = value
            else:
                language_args[key] = value

        # Unknown keys are language-specific settings
        if language_args:
            merged = dict(config_args.get("language_config") or {})
            merged.update(language_args)
            config_args["language_config"] = merged

        return CompilerConfig(**config_args)

    def save_config(self, config: CompilerConfig, output_path: Union[str, Path]):
        """Save configuration to JSON file."""
        path = Path(output_path)

        config_dict = asdict(config)
        language_config = config_dict.pop("language_config")
        config_dict.update(language_config)

        try:
            with open(path, "w", encoding="utf-8") as f:
                json.dump(config_dict, f, indent=2, ensure_ascii=False)
        except OSError as e:
            raise ConfigError(f"Failed to save configuration to {path}: {e}") from e

    def validate_config(self, config: CompilerConfig) -> List[str]:
        """
        Validate configuration.

        Returns:
            List of validation warnings
        """
        warnings = []

        if not config.enum_name.isidentifier():
            warnings.append(f"Invalid enum_name: {config.enum_name}")

        if not config.all_codes_name.isidentifier():
            warnings.append(f"Invalid all_codes_name: {config.all_codes_name}")

        if config.enum_name == config.all_codes_name:
            warnings.append("enum_name and all_codes_name must differ")

        if config.indent_size < 1:
            warnings.append(f"Invalid indent_size: {config.indent_size}")

        if config.line_ending not in {"\n", "\r\n"}:
            warnings.append(f"Invalid line_ending: {config.line_ending!r}")

        return warnings


# Global configuration manager instance
_config_manager = None


def get_config_manager() -> ConfigManager:
    """Get the global configuration manager instance."""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager


def load_config(
    custom_config: Optional[Dict[str, Any]] = None,
    config_file: Optional[Union[str, Path]] = None,
) -> CompilerConfig:
    """
    Convenience function to load configuration.

    Args:
        custom_config: Custom configuration overrides
        config_file: Path to JSON configuration file

    Returns:
        Merged configuration
    """
    return get_config_manager().get_config(custom_config, config_file)


# Example configuration file for reference
EXAMPLE_CONFIG = {
    "enum_name": "BizErrorCode",
    "add_comments": True,
    "require_default_message": True,
    "unique_codes": True,
}
