"""Action command - GitHub Actions entry point."""

import sys
import click
from ... import summarize as summarize_plan
from ...config import load_config, get_logging_config, get_summary_config
from ...report.github import format_step_summary, get_input, set_failed, set_output, write_step_summary
from ...utils.errors import TFSummaryError
from ...utils.logging import get_logger, set_log_level

logger = get_logger("cli.action")


@click.command()
@click.option('--plan-file-path', default=None, help="Plan JSON path (defaults to the 'plan-file-path' action input)")
@click.option('--config', 'config_path', type=click.Path(), default=None, help='Path to a tfsummary config YAML')
def action(plan_file_path, config_path):
    """
    Run as a GitHub Action step.
    
    Writes the plan summary to the job summary and the configured step
    output. Any failure is reported as a workflow error and exits 1.
    """
    try:
        config = load_config(config_path)
        logging_config = get_logging_config(config)
        # --verbose on the group wins over the configured level
        if not click.get_current_context().find_root().params.get("verbose"):
            set_log_level(logging_config["level"])
        summary_config = get_summary_config(config)
        
        if plan_file_path is None:
            plan_file_path = get_input("plan-file-path", required=True)
        
        summary_text = summarize_plan(plan_file_path)
        
        write_step_summary(format_step_summary(
            summary_text,
            heading=summary_config.get("heading", "Infrastructure Changes"),
            language=summary_config.get("code_language", "terraform"),
        ))
        set_output(summary_config.get("output_name", "changes-summary"), summary_text)
        logger.info("Action completed successfully")
    
    except (TFSummaryError, OSError) as e:
        set_failed(str(e))
        sys.exit(1)
