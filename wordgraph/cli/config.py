#!/usr/bin/env python3
"""
Configuration loader for the word graph toolkit

Loads an optional YAML file, substitutes ${VAR} environment references and
merges the result over the built-in defaults.
"""

import copy
import os
import re
import yaml
import logging
from pathlib import Path
from typing import Dict, Any, Optional, Union

from ..errors import ConfigurationError
from .config_validator import ConfigurationValidator

logger = logging.getLogger(__name__)

_ENV_PATTERN = re.compile(r'\$\{([^}]+)\}')

DEFAULT_CONFIG: Dict[str, Any] = {
    'graph': {
        'vertex_membership': 'all',
    },
    'pagerank': {
        'damping': 0.85,
        'iterations': 100,
        'normalized': False,
    },
    'random': {
        'seed': None,
    },
    'render': {
        'enabled': True,
        'dot_file': 'graph.dot',
        'image_file': 'output_graph.png',
        'format': 'png',
        'executable': 'dot',
        'timeout': 60,
    },
    'random_walk': {
        'output_file': 'random_walk.txt',
    },
    'logging': {
        'level': 'WARNING',
        'file': None,
    },
}


def substitute_env_vars(value: Any) -> Any:
    """
    Recursively substitute environment variables in configuration values.

    Supports ${VAR_NAME} syntax.
    """
    if isinstance(value, str):
        for var_name in _ENV_PATTERN.findall(value):
            env_value = os.getenv(var_name)
            if env_value is None:
                logger.warning(f"Environment variable {var_name} not set")
                env_value = ""
            value = value.replace(f"${{{var_name}}}", env_value)
        return value

    elif isinstance(value, dict):
        return {k: substitute_env_vars(v) for k, v in value.items()}

    elif isinstance(value, list):
        return [substitute_env_vars(item) for item in value]

    else:
        return value


def merge_config(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Deep-merge ``override`` into a copy of ``base``."""
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = merge_config(merged[key], value)
        else:
            merged[key] = value
    return merged


def default_config() -> Dict[str, Any]:
    return copy.deepcopy(DEFAULT_CONFIG)


def load_config(config_path: Optional[Union[str, Path]] = None,
                overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """
    Load configuration and validate it.

    Args:
        config_path: Optional YAML file; defaults are used when omitted
        overrides: Values applied last, e.g. from command-line options

    Returns:
        Complete configuration dictionary

    Raises:
        ConfigurationError: if the file cannot be read or parsed, or a value
            is invalid
    """
    config = default_config()

    if config_path:
        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                raw_config = yaml.safe_load(f) or {}
        except OSError as e:
            raise ConfigurationError(f"Cannot read configuration file {config_path}: {e}") from e
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in {config_path}: {e}") from e

        if not isinstance(raw_config, dict):
            raise ConfigurationError(f"Configuration file {config_path} must contain a mapping")

        config = merge_config(config, substitute_env_vars(raw_config))
        logger.debug(f"Loaded configuration from {config_path}")

    if overrides:
        config = merge_config(config, overrides)

    validator = ConfigurationValidator()
    is_valid, issues = validator.validate(config)

    for issue in validator.warnings:
        logger.warning(f"Config validation warning: {issue}")

    if not is_valid:
        for issue in validator.errors:
            logger.error(f"Config validation error: {issue}")
        raise ConfigurationError("Configuration validation failed: " + "; ".join(validator.errors))

    return config
