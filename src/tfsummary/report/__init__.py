"""Report module - CI output surfaces for plan summaries."""

from .github import format_step_summary, get_input, set_failed, set_output, write_step_summary

__all__ = [
    "format_step_summary",
    "get_input",
    "set_failed",
    "set_output",
    "write_step_summary",
]
