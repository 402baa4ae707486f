"""tfsummary - Human-readable Terraform plan summaries for CI."""

from typing import Optional
from .ingest.filesystem import FileSystemAdapter
from .ingest.input_validator import validate_plan_file_path
from .ingest.plan_reader import read_plan_file
from .ingest.plan_parser import parse_plan
from .presentation.text_formatter import format_plan_summary
from .utils.logging import setup_logging, get_logger

__version__ = "0.1.0"

__all__ = ["summarize"]

setup_logging()
logger = get_logger("pipeline")


def summarize(plan_file_path: str, filesystem: Optional[FileSystemAdapter] = None) -> str:
    """Validate, read, parse and format a Terraform plan JSON file."""
    logger.info(f"Processing plan file: {plan_file_path}")
    
    logger.info("Validating plan file path...")
    validate_plan_file_path(plan_file_path, filesystem)
    
    logger.info("Reading plan file...")
    plan_file = read_plan_file(plan_file_path, filesystem)
    logger.info(f"Successfully read plan file ({len(plan_file.content)} bytes)")
    
    logger.info("Parsing plan file...")
    plan = parse_plan(plan_file.content)
    logger.info(f"Successfully parsed plan ({len(plan.resource_changes)} resource changes)")
    
    summary = format_plan_summary(plan)
    logger.info("Successfully formatted plan summary")
    return summary
