"""Rule group assembly for one destination rule file."""

from __future__ import annotations

from typing import Any, Sequence

from slorules.generators.burn_rate import generate
from slorules.recording_rules.models import RuleGroup, create_rule_groups
from slorules.specs.models import SloInput


def build_rule_group(slo: SloInput) -> RuleGroup:
    """Build the ``<service>_<slo_name>_slo`` group for one SLO.

    Recording rules come first, followed by the alert rules.
    """
    recording_rules, alert_rules = generate(slo)

    group = RuleGroup(name=slo.group_name)
    for rule in recording_rules:
        group.add_rule(rule)
    for alert in alert_rules:
        group.add_rule(alert)

    return group


def assemble(slos: Sequence[SloInput]) -> list[RuleGroup]:
    """Build one rule group per SLO, in input order."""
    return [build_rule_group(slo) for slo in slos]


def build_document(slos: Sequence[SloInput]) -> dict[str, Any]:
    """Build the Prometheus rule file document for one destination."""
    return {"groups": [group.to_dict() for group in assemble(slos)]}


def render_rule_file(slos: Sequence[SloInput]) -> str:
    """Render the rule file for one destination as YAML."""
    return create_rule_groups(assemble(slos))
