"""Summarize command - render a Terraform plan as a change summary."""

import logging
import sys
from pathlib import Path
import click
from ... import summarize as summarize_plan
from ...utils.errors import TFSummaryError
from ...utils.logging import get_logger, set_log_level
from ..utils import format_error

logger = get_logger("cli.summarize")

PLAN_TIP = "Generate a plan using: terraform show -json plan.out > plan.json"


@click.command()
@click.argument('plan_json', type=click.Path(exists=False))
@click.option('--output', '-o', type=click.Path(), help='Save summary to file')
@click.option('--quiet', is_flag=True, help='Suppress progress messages and info logs')
def summarize(plan_json, output, quiet):
    """
    Summarize the resource changes in a Terraform plan JSON file.
    
    Prints the same "Plan: N to add, N to change, N to destroy." summary
    the GitHub Action writes to the job summary.
    """
    if quiet:
        set_log_level(logging.WARNING)
    
    try:
        if not quiet:
            click.echo(f"Loading plan: {plan_json}", err=True)
        
        summary_text = summarize_plan(plan_json)
        
        if output:
            output_path = Path(output)
            output_path.parent.mkdir(parents=True, exist_ok=True)
            with open(output_path, 'w', encoding='utf-8') as f:
                f.write(summary_text)
            if not quiet:
                click.echo(f"Summary saved to: {output_path}", err=True)
        else:
            click.echo(summary_text, nl=False)
    
    except TFSummaryError as e:
        click.echo(format_error(str(e), PLAN_TIP), err=True)
        sys.exit(1)
    except OSError as e:
        logger.error(f"Unexpected filesystem error: {e}", exc_info=True)
        click.echo(format_error(str(e)), err=True)
        sys.exit(1)
