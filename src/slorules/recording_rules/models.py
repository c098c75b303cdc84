"""Data models for Prometheus recording rules and rule groups."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Union

import yaml

from slorules.alerts.models import AlertRule


@dataclass(frozen=True)
class RecordingRule:
    """A Prometheus recording rule.

    Recording rules precompute frequently needed or expensive expressions
    and save their result as a new time series.
    """

    record: str
    """The name of the time series to output to."""

    expr: str
    """The PromQL expression to evaluate."""

    def to_dict(self) -> Dict[str, Any]:
        """Convert to Prometheus rule format.

        Returns:
            Dictionary in Prometheus recording rule format
        """
        return {
            "record": self.record,
            "expr": self.expr,
        }


# A rule group mixes both shapes; each variant serializes itself.
Rule = Union[RecordingRule, AlertRule]


@dataclass
class RuleGroup:
    """A group of recording and alerting rules.

    Prometheus organizes rules into groups that are evaluated together.
    Rules keep the order they were added in.
    """

    name: str
    """The name of the rule group."""

    rules: List[Rule] = field(default_factory=list)
    """Recording rules first, then alert rules."""

    def add_rule(self, rule: Rule):
        """Add a rule to this group.

        Args:
            rule: RecordingRule or AlertRule to add
        """
        self.rules.append(rule)

    @property
    def recording_rules(self) -> List[RecordingRule]:
        return [rule for rule in self.rules if isinstance(rule, RecordingRule)]

    @property
    def alert_rules(self) -> List[AlertRule]:
        return [rule for rule in self.rules if isinstance(rule, AlertRule)]

    def to_dict(self) -> dict:
        """Convert to Prometheus rule group format.

        Returns:
            Dictionary in Prometheus rule group format
        """
        return {
            "name": self.name,
            "rules": [rule.to_dict() for rule in self.rules],
        }


def create_rule_groups(groups: List[RuleGroup]) -> str:
    """Create YAML output for multiple rule groups.

    Args:
        groups: List of RuleGroup objects

    Returns:
        YAML string with all groups
    """
    data = {"groups": [group.to_dict() for group in groups]}
    # Keep long PromQL expressions on a single line
    return yaml.dump(data, default_flow_style=False, sort_keys=False, width=float("inf"))
