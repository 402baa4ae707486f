"""Read Terraform plan JSON files from disk."""

from typing import Optional
from .filesystem import FileSystemAdapter, LocalFileSystem
from .models import PlanFile
from ..utils.errors import (
    NotAFileError,
    PermissionDeniedError,
    PlanFileNotFoundError,
    PlanReadError,
)
from ..utils.logging import get_logger

logger = get_logger("ingest.plan_reader")


def read_plan_file(plan_path: str, filesystem: Optional[FileSystemAdapter] = None) -> PlanFile:
    """
    Read a plan file as UTF-8 text.
    
    Args:
        plan_path: Path to the Terraform plan JSON file
        filesystem: Filesystem to read from (defaults to local disk)
        
    Returns:
        PlanFile with the path and raw content
        
    Raises:
        PlanFileNotFoundError: If the file does not exist
        PermissionDeniedError: If the file cannot be accessed
        NotAFileError: If the path is not a regular file
        PlanReadError: For any other read failure
    """
    filesystem = filesystem or LocalFileSystem()
    
    try:
        if not filesystem.is_file(plan_path):
            raise NotAFileError(f"Path is not a file: {plan_path}")
        content = filesystem.read_text(plan_path)
    except FileNotFoundError:
        raise PlanFileNotFoundError(f"File does not exist: {plan_path}")
    except PermissionError:
        raise PermissionDeniedError(f"Permission denied: {plan_path}")
    except IsADirectoryError:
        raise NotAFileError(f"Path is not a file: {plan_path}")
    except (OSError, UnicodeDecodeError) as e:
        raise PlanReadError(f"Failed to read file: {plan_path} ({e})") from e
    
    logger.debug(f"Read {len(content)} characters from {plan_path}")
    return PlanFile(path=plan_path, content=content)
