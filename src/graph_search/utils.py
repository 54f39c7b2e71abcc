"""Logging helpers."""

import logging
from typing import Optional, Union

from omegaconf import DictConfig, OmegaConf


def setup_logging(level: Union[int, str] = logging.INFO,
                  format_string: Optional[str] = None) -> None:
    """Setup logging configuration.

    Args:
        level: Logging level, as a number or a name such as ``"DEBUG"``
        format_string: Custom format string

    Raises:
        ValueError: If ``level`` is not a known level name
    """
    if isinstance(level, str):
        name = level.upper()
        level = logging.getLevelName(name)
        if not isinstance(level, int):
            raise ValueError(f"Unknown logging level: {name}")

    if format_string is None:
        if level <= logging.DEBUG:
            format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        else:
            format_string = "%(levelname)s: %(message)s"

    logging.basicConfig(
        level=level,
        format=format_string,
        datefmt="%Y-%m-%d %H:%M:%S",
        force=True
    )


def setup_logging_from_config(config: DictConfig) -> None:
    """Apply the ``logging`` section of a loaded configuration."""
    setup_logging(OmegaConf.select(config, 'logging.level', default='INFO'))
