"""GitHub Actions integration: inputs, job summary, step outputs and failure annotations."""

import os
import uuid
from pathlib import Path
from typing import Optional
import click
from ..utils.errors import InputRequiredError, ReportError
from ..utils.logging import get_logger

logger = get_logger("report.github")


def _escape_data(value: str) -> str:
    """Escape a workflow command message."""
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def _escape_property(value: str) -> str:
    """Escape a workflow command property value."""
    return _escape_data(value).replace(":", "%3A").replace(",", "%2C")


def get_input(name: str, required: bool = False) -> str:
    """
    Read an action input from the environment.
    
    GitHub exposes `with:` inputs as INPUT_<NAME> with spaces replaced by
    underscores and the name upper-cased (hyphens are kept).
    
    Args:
        name: Input name as declared in action.yml
        required: Raise if the input is missing or blank
        
    Returns:
        Trimmed input value ("" when absent and not required)
        
    Raises:
        InputRequiredError: If a required input is not supplied
    """
    value = os.environ.get(f"INPUT_{name.replace(' ', '_').upper()}", "").strip()
    if required and not value:
        raise InputRequiredError(f"Input required and not supplied: {name}")
    return value


def format_step_summary(summary: str, heading: str = "Infrastructure Changes", language: str = "terraform") -> str:
    """Wrap a plan summary in markdown for the job summary page."""
    body = summary if summary.endswith("\n") else summary + "\n"
    return f"## {heading}\n\n```{language}\n{body}```\n"


def write_step_summary(content: str, path: Optional[str] = None) -> Path:
    """
    Append markdown to the job summary file.
    
    Args:
        content: Markdown to append
        path: Summary file (defaults to $GITHUB_STEP_SUMMARY)
        
    Returns:
        Path that was written
        
    Raises:
        ReportError: If no summary file is available or it cannot be written
    """
    target = path or os.environ.get("GITHUB_STEP_SUMMARY")
    if not target:
        raise ReportError(
            "Unable to find environment variable for $GITHUB_STEP_SUMMARY. "
            "Check if your runtime environment supports job summaries."
        )
    
    summary_path = Path(target)
    try:
        with open(summary_path, 'a', encoding='utf-8') as f:
            f.write(content)
    except OSError as e:
        raise ReportError(f"Failed to write job summary to {summary_path}: {e}")
    
    logger.debug(f"Wrote job summary to {summary_path}")
    return summary_path


def set_output(name: str, value: str, path: Optional[str] = None) -> None:
    """
    Set a step output.
    
    Writes a heredoc-style record to $GITHUB_OUTPUT so multi-line values
    survive; falls back to the legacy ::set-output command when unset.
    
    Raises:
        ReportError: If the output file cannot be written
    """
    target = path or os.environ.get("GITHUB_OUTPUT")
    if not target:
        logger.warning("GITHUB_OUTPUT is not set, falling back to ::set-output")
        click.echo(f"::set-output name={_escape_property(name)}::{_escape_data(value)}")
        return
    
    delimiter = f"ghadelimiter_{uuid.uuid4()}"
    if delimiter in name or delimiter in value:
        raise ReportError(f"Unexpected input: output '{name}' contains the delimiter {delimiter}")
    
    try:
        with open(target, 'a', encoding='utf-8') as f:
            f.write(f"{name}<<{delimiter}\n{value}\n{delimiter}\n")
    except OSError as e:
        raise ReportError(f"Failed to write step output '{name}' to {target}: {e}")
    
    logger.debug(f"Set step output '{name}' ({len(value)} characters)")


def set_failed(message: str) -> None:
    """Annotate the workflow run with an error; the caller is responsible for the exit code."""
    click.echo(f"::error::{_escape_data(message)}")
