"""Validate command - check a plan file without rendering it."""

import sys
import click
from ...ingest.input_validator import validate_plan_file_path
from ...ingest.plan_reader import read_plan_file
from ...ingest.plan_parser import try_parse_plan
from ...utils.errors import TFSummaryError
from ..utils import format_error


@click.command()
@click.argument('plan_json', type=click.Path(exists=False))
def validate(plan_json):
    """Check that PLAN_JSON is a readable, well-formed Terraform plan."""
    try:
        validate_plan_file_path(plan_json)
        plan_file = read_plan_file(plan_json)
    except (TFSummaryError, OSError) as e:
        click.echo(format_error(str(e)), err=True)
        sys.exit(1)
    
    outcome = try_parse_plan(plan_file.content)
    if not outcome.ok:
        click.echo(format_error(f"[{outcome.error_kind.value}] {outcome.message}"), err=True)
        sys.exit(1)
    
    click.echo(f"Plan is valid ({len(outcome.plan.resource_changes)} resource changes)")
