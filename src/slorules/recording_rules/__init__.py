"""Prometheus recording rules and rule groups.

Models for the rule groups written into generated rule files.
"""

from slorules.recording_rules.models import (
    RecordingRule,
    Rule,
    RuleGroup,
    create_rule_groups,
)

__all__ = [
    "RecordingRule",
    "Rule",
    "RuleGroup",
    "create_rule_groups",
]
