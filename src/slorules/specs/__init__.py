"""
SLO input definitions and the configuration file that declares them.
"""

from slorules.specs.models import SloConfig, SloInput
from slorules.specs.parser import SloConfigError, load_slo_config, parse_slo_config

__all__ = [
    "SloConfig",
    "SloConfigError",
    "SloInput",
    "load_slo_config",
    "parse_slo_config",
]
