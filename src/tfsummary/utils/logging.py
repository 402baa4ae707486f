"""Logging setup for tfsummary."""

import logging
import sys
from typing import Optional


def setup_logging(level: int = logging.INFO, format_string: Optional[str] = None) -> logging.Logger:
    """
    Configure stderr logging for tfsummary via logging.basicConfig.
    
    Args:
        level: Logging level (default: INFO)
        format_string: Custom format string (optional)
    
    Returns:
        Configured logger instance
    """
    if format_string is None:
        format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    
    logging.basicConfig(
        level=level,
        format=format_string,
        stream=sys.stderr,
        datefmt="%Y-%m-%d %H:%M:%S"
    )
    
    logger = logging.getLogger("tfsummary")
    return logger


def set_log_level(level) -> None:
    """Change the level of the tfsummary logger tree ("DEBUG", "INFO", ... or an int)."""
    if isinstance(level, str):
        resolved = logging.getLevelName(level.strip().upper())
        if not isinstance(resolved, int):
            logging.getLogger("tfsummary").warning(f"Unknown log level '{level}', keeping current level")
            return
        level = resolved
    logging.getLogger("tfsummary").setLevel(level)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for a specific module."""
    return logging.getLogger(f"tfsummary.{name}")
