"""YAML configuration loading and validation.

This module loads converter settings from a YAML file. A missing or empty
file means defaults; anything malformed is reported as a ConfigError.
"""

import logging
from typing import Any, Dict

import yaml

from ..errors import ConfigError, FilesystemError
from .models import ConverterConfig

logger = logging.getLogger(__name__)


class ConfigLoader:
    """Handles configuration file loading and validation.

    Configuration file structure:
        markdown: true
        sanitize: true
        json_indent: 2
    """

    DEFAULT_CONFIG_FILE = '.editor-markdown.yaml'

    # Allowed fields and their expected types
    FIELD_TYPES = {
        'markdown': bool,
        'sanitize': bool,
        'json_indent': int,
    }

    MAX_JSON_INDENT = 8

    @classmethod
    def load(cls, config_path: str) -> ConverterConfig:
        """Load and parse configuration from a YAML file.

        Args:
            config_path: Path to the YAML configuration file

        Returns:
            ConverterConfig with parsed configuration

        Raises:
            FilesystemError: If the file exists but cannot be read
            ConfigError: If the configuration is invalid or malformed
        """
        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                content = f.read()
        except FileNotFoundError:
            logger.debug(f"No config file at {config_path}, using defaults")
            return ConverterConfig()
        except PermissionError:
            raise FilesystemError(
                config_path,
                'read',
                'Permission denied'
            )
        except OSError as e:
            raise FilesystemError(
                config_path,
                'read',
                str(e)
            )

        if not content.strip():
            return ConverterConfig()

        try:
            config_dict = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise ConfigError(
                f"Invalid YAML syntax: {str(e)}"
            )

        if config_dict is None:
            return ConverterConfig()

        if not isinstance(config_dict, dict):
            raise ConfigError(
                f"Config must be a YAML dictionary, got {type(config_dict).__name__}"
            )

        config = cls._parse_config(config_dict)
        logger.debug(f"Loaded config from {config_path}: {config}")
        return config

    @classmethod
    def _parse_config(cls, config_dict: Dict[str, Any]) -> ConverterConfig:
        """Validate a raw configuration dictionary.

        Args:
            config_dict: Raw configuration dictionary from YAML

        Returns:
            Validated ConverterConfig

        Raises:
            ConfigError: If a field is unknown or has the wrong type
        """
        unknown = sorted(str(key) for key in config_dict if key not in cls.FIELD_TYPES)
        if unknown:
            raise ConfigError(
                f"Unknown field(s): {', '.join(unknown)}"
            )

        values = {}
        for name, expected_type in cls.FIELD_TYPES.items():
            if name not in config_dict:
                continue
            value = config_dict[name]
            # bool is a subclass of int, so reject it explicitly for int fields
            if not isinstance(value, expected_type) or (
                expected_type is int and isinstance(value, bool)
            ):
                raise ConfigError(
                    f"Must be {expected_type.__name__}, got {type(value).__name__}",
                    name
                )
            values[name] = value

        indent = values.get('json_indent')
        if indent is not None and not 0 <= indent <= cls.MAX_JSON_INDENT:
            raise ConfigError(
                f"Must be between 0 and {cls.MAX_JSON_INDENT}, got {indent}",
                'json_indent'
            )

        return ConverterConfig(**values)
