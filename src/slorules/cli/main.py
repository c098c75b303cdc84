"""
Command line entry point for slorules.

Usage:
    slorules [--config prometheus-slo.yaml] [--output-dir DIR] [--dry-run]
"""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

from slorules.cli.generate import generate_command
from slorules.config.settings import get_settings
from slorules.logging import configure_logging


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()

    parser = argparse.ArgumentParser(
        prog="slorules",
        description="Generate multiwindow, multi-burn-rate SLO rules for Prometheus",
    )
    parser.add_argument(
        "--config",
        default=settings.config_file,
        help=f"File path containing the config to generate SLO rules (default: {settings.config_file})",
    )
    parser.add_argument(
        "--output-dir",
        default=settings.output_dir,
        help="Base directory for relative rule file destinations",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print generated rules to stdout instead of writing files",
    )
    parser.add_argument(
        "--log-level",
        default=settings.log_level,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help="Log level",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(args.log_level, json_logs=get_settings().json_logs)

    sys.exit(generate_command(args.config, output_dir=args.output_dir, dry_run=args.dry_run))
