"""Pre-flight checks on the plan file path."""

from typing import Optional
from .filesystem import FileSystemAdapter, LocalFileSystem
from ..utils.errors import (
    InputRequiredError,
    NotAFileError,
    PermissionDeniedError,
    PlanFileNotFoundError,
)
from ..utils.logging import get_logger

logger = get_logger("ingest.input_validator")


def validate_plan_file_path(plan_path: Optional[str], filesystem: Optional[FileSystemAdapter] = None) -> None:
    """
    Validate that a plan file path is usable before reading it.
    
    Args:
        plan_path: Path supplied by the user or CI input
        filesystem: Filesystem to stat against (defaults to local disk)
        
    Raises:
        InputRequiredError: If the path is empty or whitespace
        PlanFileNotFoundError: If nothing exists at the path
        PermissionDeniedError: If the path cannot be stat'ed due to permissions
        NotAFileError: If the path is not a regular file
        OSError: Any other stat failure, unchanged
    """
    if not plan_path or not plan_path.strip():
        raise InputRequiredError("Plan file path is required")
    
    filesystem = filesystem or LocalFileSystem()
    
    try:
        is_file = filesystem.is_file(plan_path)
    except FileNotFoundError:
        raise PlanFileNotFoundError(f"File does not exist: {plan_path}")
    except PermissionError:
        raise PermissionDeniedError(f"Permission denied: {plan_path}")
    
    if not is_file:
        raise NotAFileError("Path is a directory, not a file")
    
    logger.debug(f"Plan file path is valid: {plan_path}")
