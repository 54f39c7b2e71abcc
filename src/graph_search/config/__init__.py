"""Configuration management for the search engine.

This module provides Hydra-based configuration management with runtime
override capabilities.
"""

from .config_manager import ConfigManager, ConfigContext, load_config, get_config, get_parameter, clear_config
from .validators import validate_config, check_config_consistency, ConfigValidationError

__all__ = [
    'ConfigManager',
    'ConfigContext',
    'load_config',
    'get_config',
    'get_parameter',
    'clear_config',
    'validate_config',
    'check_config_consistency',
    'ConfigValidationError'
]
