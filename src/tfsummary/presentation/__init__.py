"""Presentation layer - human-readable renderings of parsed plans."""

from .text_formatter import ChangeBuckets, classify_resource_changes, format_plan_summary

__all__ = ["ChangeBuckets", "classify_resource_changes", "format_plan_summary"]
