"""Config path resolution."""

from pathlib import Path
from typing import Optional


def get_default_config_path() -> Path:
    """Get the bundled defaults.yaml path."""
    return Path(__file__).parent / "defaults.yaml"


def get_project_config_path() -> Optional[Path]:
    """Get project config path: .tfsummary/config.yaml (from current working directory)"""
    cwd = Path.cwd()
    project_config = cwd / ".tfsummary" / "config.yaml"
    if project_config.exists():
        return project_config
    return None
