"""
CLI commands for slorules.
"""

from slorules.cli.generate import generate_command

__all__ = [
    "generate_command",
]
