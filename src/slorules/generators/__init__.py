"""Rule generators for multiwindow, multi-burn-rate SLO alerting."""

from slorules.generators.burn_rate import BurnRateRuleBuilder, generate
from slorules.generators.groups import assemble, build_document, build_rule_group, render_rule_file
from slorules.generators.rule_files import render_rule_files, write_rule_files

__all__ = [
    "BurnRateRuleBuilder",
    "assemble",
    "build_document",
    "build_rule_group",
    "generate",
    "render_rule_file",
    "render_rule_files",
    "write_rule_files",
]
