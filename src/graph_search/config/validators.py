"""Configuration validation for the search engine."""

import logging
from typing import List

from omegaconf import DictConfig

logger = logging.getLogger(__name__)

LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


class ConfigValidationError(Exception):
    """Exception raised when configuration validation fails."""
    pass


def validate_config(config: DictConfig) -> None:
    """Validate the complete configuration.

    Args:
        config: Configuration to validate

    Raises:
        ConfigValidationError: If validation fails
    """
    validate_search_config(config.get('search', {}))
    validate_logging_config(config.get('logging', {}))

    logger.debug("Configuration validation passed")


def validate_search_config(search_config: DictConfig) -> None:
    """Validate search configuration section.

    Args:
        search_config: Search configuration section
    """
    if not search_config:
        return

    for key in ('track_explored', 'with_paths', 'debug'):
        value = search_config.get(key, False)
        if not isinstance(value, bool):
            raise ConfigValidationError(f"search.{key} must be boolean, got {value!r}")

    max_expansions = search_config.get('max_expansions', None)
    if max_expansions is not None:
        if isinstance(max_expansions, bool) or not isinstance(max_expansions, int) or max_expansions <= 0:
            raise ConfigValidationError(
                f"search.max_expansions must be positive integer or null, got {max_expansions!r}"
            )


def validate_logging_config(logging_config: DictConfig) -> None:
    """Validate logging configuration section.

    Args:
        logging_config: Logging configuration section
    """
    if not logging_config:
        return

    level = logging_config.get('level', 'INFO')
    if not isinstance(level, str) or level.upper() not in LOG_LEVELS:
        raise ConfigValidationError(
            f"logging.level must be one of {', '.join(LOG_LEVELS)}, got {level!r}"
        )


def check_config_consistency(config: DictConfig) -> List[str]:
    """Return settings that are valid but probably unintended.

    Args:
        config: Configuration to check

    Returns:
        List of warning messages
    """
    issues = []
    search_config = config.get('search', {})
    if not search_config:
        return issues

    if not search_config.get('track_explored', True) and search_config.get('max_expansions') is None:
        issues.append(
            "search.track_explored is off with no max_expansions: "
            "searches over cyclic spaces may not terminate"
        )

    if search_config.get('debug', False):
        level = str(config.get('logging', {}).get('level', 'INFO')).upper()
        if level != 'DEBUG':
            issues.append(f"search.debug is on but logging.level is {level}; events will not be shown")

    return issues
