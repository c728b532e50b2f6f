"""
Configuration management for schema code generation.

Handles loading and merging configuration from JSON files, providing
defaults per generator type and validation of generator settings.
"""

import json
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from ...logging_config import get_logger
from ..languages.go.naming import validate_go_package_name
from .errors import GeneratorError
from .imports import SCHEMA_IMPORTS

logger = get_logger(__name__)

GENERATOR_TYPES = tuple(SCHEMA_IMPORTS)

LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class ConfigError(GeneratorError):
    """Exception raised for configuration-related errors."""

    pass


@dataclass
class GeneratorConfig:
    """Settings for one schema generation run."""

    # Output settings
    package_name: str = "provider"
    generator_type: str = "resource"  # resource, data_source, provider
    output_file: Optional[str] = None

    log_level: str = "WARNING"

    # Custom settings
    custom: Dict[str, Any] = field(default_factory=dict)


class ConfigManager:
    """Manages configuration loading and merging."""

    def __init__(self):
        """Initialize configuration manager."""
        self._configs: Dict[str, Dict[str, Any]] = {}
        self._load_defaults()

    def _load_defaults(self):
        """Load default configurations for each generator type."""
        self._configs["resource"] = {
            "package_name": "provider",
            "generator_type": "resource",
            "output_file": "resource_gen.go",
        }

        self._configs["data_source"] = {
            "package_name": "provider",
            "generator_type": "data_source",
            "output_file": "data_source_gen.go",
        }

        self._configs["provider"] = {
            "package_name": "provider",
            "generator_type": "provider",
            "output_file": "provider_gen.go",
        }

    def get_config(
        self,
        generator_type: str = "resource",
        custom_config: Optional[Dict[str, Any]] = None,
        config_file: Optional[Union[str, Path]] = None,
    ) -> GeneratorConfig:
        """
        Get complete configuration for a generator type.

        Args:
            generator_type: resource, data_source or provider
            custom_config: Custom configuration overrides
            config_file: Path to JSON configuration file

        Returns:
            Merged configuration

        Raises:
            ConfigError: If the generator type is unknown or the file is invalid
        """
        if generator_type not in self._configs:
            raise ConfigError(
                f"Unknown generator type: {generator_type}. "
                f"Available: {', '.join(self.list_generator_types())}"
            )

        # Start with defaults
        base_config = dict(self._configs[generator_type])

        if config_file:
            base_config.update(self._load_config_file(config_file))

        if custom_config:
            base_config.update(custom_config)

        return self._dict_to_config(base_config)

    def _load_config_file(self, config_path: Union[str, Path]) -> Dict[str, Any]:
        """Load configuration from JSON file."""
        path = Path(config_path)

        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")

        if path.suffix.lower() != ".json":
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

        logger.debug("Loaded configuration from %s", path)
        return config

    def _dict_to_config(self, config_dict: Dict[str, Any]) -> GeneratorConfig:
        """Convert dictionary to GeneratorConfig; unknown keys go to ``custom``."""
        known_fields = set(GeneratorConfig.__dataclass_fields__)

        config_args = {}
        custom_args = {}

        for key, value in config_dict.items():
            if key in known_fields:
                config_args[key] = value
            else:
                custom_args[key] = value

        if custom_args:
            existing_custom = dict(config_args.get("custom") or {})
            existing_custom.update(custom_args)
            config_args["custom"] = existing_custom

        return GeneratorConfig(**config_args)

    def save_config(self, config: GeneratorConfig, output_path: Union[str, Path]):
        """Save configuration to JSON file."""
        path = Path(output_path)

        config_dict = asdict(config)
        custom = config_dict.pop("custom")
        config_dict.update(custom)

        try:
            with open(path, "w", encoding="utf-8") as f:
                json.dump(config_dict, f, indent=2, ensure_ascii=False)
        except OSError as e:
            raise ConfigError(f"Failed to save configuration to {path}: {e}") from e

    def list_generator_types(self) -> List[str]:
        return list(self._configs.keys())

    def validate_config(self, config: GeneratorConfig) -> List[str]:
        """
        Validate configuration.

        Returns:
            List of validation warnings/errors
        """
        warnings = []

        if config.generator_type not in GENERATOR_TYPES:
            warnings.append(f"Invalid generator_type: {config.generator_type}")

        for error in validate_go_package_name(config.package_name):
            warnings.append(f"Invalid package_name: {error}")

        if str(config.log_level).upper() not in LOG_LEVELS:
            warnings.append(f"Invalid log_level: {config.log_level}")

        if config.output_file and not config.output_file.endswith(".go"):
            warnings.append(f"Output file should have a .go extension: {config.output_file}")

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
    generator_type: str = "resource",
    custom_config: Optional[Dict[str, Any]] = None,
    config_file: Optional[Union[str, Path]] = None,
) -> GeneratorConfig:
    """
    Convenience function to load configuration.

    Args:
        generator_type: resource, data_source or provider
        custom_config: Custom configuration overrides
        config_file: Path to JSON configuration file

    Returns:
        Merged configuration
    """
    manager = get_config_manager()
    return manager.get_config(generator_type, custom_config, config_file)


EXAMPLE_RESOURCE_CONFIG = {
    "package_name": "example",
    "generator_type": "resource",
    "output_file": "example_resource_gen.go",
    "log_level": "INFO",
}
