"""CLI command for generating SLO recording and alerting rule files."""

from __future__ import annotations

import structlog
from rich.markup import escape

from slorules.cli.ux import console, error, header, print_table, success
from slorules.generators.rule_files import render_rule_files, resolve_destination, write_rule_files
from slorules.generators.windows import expected_rule_counts
from slorules.specs.parser import SloConfigError, load_slo_config

logger = structlog.get_logger()


def generate_command(
    config_file: str,
    output_dir: str | None = None,
    dry_run: bool = False,
) -> int:
    """Generate Prometheus rule files from an SLO configuration.

    Args:
        config_file: Path to the SLO configuration YAML
        output_dir: Base directory for relative destination paths
        dry_run: If True, print YAML to stdout instead of writing files

    Returns:
        Exit code (0 for success, 1 for error)
    """
    header("Generate SLO Rules")
    console.print()
    console.print(f"[cyan]Config:[/cyan] {escape(config_file)}")
    if dry_run:
        console.print("[muted]Mode: Dry run (preview only)[/muted]")
    elif output_dir:
        console.print(f"[cyan]Output directory:[/cyan] {escape(output_dir)}")
    console.print()

    try:
        config = load_slo_config(config_file)
    except SloConfigError as e:
        logger.error("slo_config_failed", path=config_file, error=str(e))
        error(f"Error loading config: {e}")
        return 1

    recording_count, alert_count = expected_rule_counts()
    rows = [
        [
            escape(str(resolve_destination(destination, output_dir))),
            str(len(slos)),
            str(len(slos) * (recording_count + alert_count)),
        ]
        for destination, slos in config.slo_files.items()
    ]
    print_table("Rule files", ["Destination", "SLOs", "Rules"], rows)
    console.print()

    if dry_run:
        for destination, content in render_rule_files(config).items():
            console.print(f"[bold]# {escape(destination)}[/bold]")
            print(content)
        return 0

    try:
        written = write_rule_files(config, output_dir=output_dir)
    except OSError as e:
        logger.error("rule_file_write_failed", error=str(e))
        error(f"Error writing rule files: {e}")
        return 1

    success(f"Generated {len(written)} rule file(s)")
    return 0
