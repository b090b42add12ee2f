#!/usr/bin/env python3
"""
CLI Interface for the word graph toolkit

Provides the command-line entry point, configuration loading and the
interactive menu.
"""

from .main import main, cli
from .config import load_config, default_config
from .config_validator import ConfigurationValidator
from .menu import InteractiveMenu

__all__ = [
    'main',
    'cli',
    'load_config',
    'default_config',
    'ConfigurationValidator',
    'InteractiveMenu'
]
