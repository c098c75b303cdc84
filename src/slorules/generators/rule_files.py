"""
Rule file writer.

Renders every destination of an SLO config and writes it to disk.
"""

from __future__ import annotations

from pathlib import Path

import structlog

from slorules.generators.groups import render_rule_file
from slorules.specs.models import SloConfig

logger = structlog.get_logger()


def resolve_destination(destination: str, output_dir: str | Path | None = None) -> Path:
    """
    Resolve where a destination rule file is written.

    Relative destinations are placed under ``output_dir`` when it is given;
    absolute destinations are used as-is.
    """
    path = Path(destination)
    if output_dir is not None and not path.is_absolute():
        return Path(output_dir) / path
    return path


def render_rule_files(config: SloConfig) -> dict[str, str]:
    """Render the YAML of every destination, keyed by destination."""
    return {
        destination: render_rule_file(slos)
        for destination, slos in config.slo_files.items()
    }


def write_rule_files(config: SloConfig, output_dir: str | Path | None = None) -> list[Path]:
    """
    Write one rule file per destination.

    Args:
        config: Parsed SLO configuration
        output_dir: Optional base directory for relative destinations

    Returns:
        Paths of the written files, in destination order

    Raises:
        OSError: If a file cannot be written
    """
    written: list[Path] = []

    for destination, content in render_rule_files(config).items():
        path = resolve_destination(destination, output_dir)
        logger.info(
            "generating_rule_file",
            destination=destination,
            path=str(path),
            slos=len(config.slo_files[destination]),
        )

        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
        written.append(path)

    return written
