"""Configuration module: load summary and logging settings from YAML."""

from pathlib import Path
from typing import Any, Dict, Optional
import yaml
from ..utils.errors import ConfigError
from ..utils.logging import get_logger
from .paths import get_default_config_path, get_project_config_path

logger = get_logger("config")

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

__all__ = ["load_config", "get_summary_config", "get_logging_config", "get_default_config_path", "get_project_config_path"]


def _read_yaml(config_path: Path) -> Dict[str, Any]:
    """Read a YAML mapping from disk."""
    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in config file {config_path}: {e}")
    except OSError as e:
        raise ConfigError(f"Error loading config file {config_path}: {e}")
    
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file must contain a dictionary: {config_path}")
    return data


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> None:
    """Deep merge override into base (mutates base)."""
    for key, value in override.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            _deep_merge(base[key], value)
        else:
            base[key] = value


def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load configuration, layering overrides on top of the bundled defaults.
    
    Priority:
    1. Explicit config file (if provided)
    2. .tfsummary/config.yaml in the current directory
    3. Bundled defaults.yaml
    
    Args:
        config_path: Optional path to a YAML config file
        
    Returns:
        Configuration dictionary
        
    Raises:
        ConfigError: If a config file cannot be loaded
    """
    config = _read_yaml(get_default_config_path())
    
    if config_path is not None:
        override_path = Path(config_path)
        if not override_path.exists():
            raise ConfigError(f"Config file not found: {config_path}")
    else:
        override_path = get_project_config_path()
    
    if override_path is not None:
        _deep_merge(config, _read_yaml(override_path))
        logger.info(f"Loaded configuration from {override_path}")
    
    return config


def get_summary_config(config: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """
    Return the summary subsection of the config.
    
    Args:
        config: Optional config dict (if None, loads from file)
        
    Returns:
        Summary configuration dictionary
    """
    if config is None:
        config = load_config()
    
    summary = config.get("summary", {})
    if not isinstance(summary, dict):
        raise ConfigError("Config 'summary' section must be a dictionary")
    return summary


def get_logging_config(config: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """
    Return the logging subsection of the config.
    
    Raises:
        ConfigError: If the section is not a mapping or its level is not a known level name
    """
    if config is None:
        config = load_config()
    
    logging_config = config.get("logging", {})
    if logging_config is None:
        logging_config = {}
    if not isinstance(logging_config, dict):
        raise ConfigError("Config 'logging' section must be a dictionary")
    
    level = logging_config.get("level", "INFO")
    if not isinstance(level, str) or level.strip().upper() not in _LOG_LEVELS:
        raise ConfigError(
            f"Invalid logging level {level!r}: expected one of {', '.join(_LOG_LEVELS)}"
        )
    return {**logging_config, "level": level.strip().upper()}
