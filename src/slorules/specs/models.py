"""
Data models for SLO rule generation inputs.
"""

from __future__ import annotations

from dataclasses import dataclass, field


# Token substituted with each window duration inside the queries
RANGE_PLACEHOLDER = "$__range"


@dataclass(frozen=True)
class SloInput:
    """
    One SLO definition to expand into recording and alerting rules.

    All fields are text. ``threshold`` (e.g. "99.9") is never parsed so it
    lands in the generated expressions exactly as written.
    """

    service: str
    slo_name: str
    alertname: str
    alert_summary: str
    success_query: str
    total_query: str
    threshold: str

    @property
    def group_name(self) -> str:
        """Name of the rule group generated for this SLO."""
        return f"{self.service}_{self.slo_name}_slo"

    @property
    def metric_prefix(self) -> str:
        """Prefix shared by every recording rule derived from this SLO."""
        return f"cluster_namespace:{self.service}_{self.slo_name}"


@dataclass
class SloConfig:
    """
    Parsed configuration: destination rule file -> ordered SLO inputs.
    """

    slo_files: dict[str, list[SloInput]] = field(default_factory=dict)

    @property
    def destinations(self) -> list[str]:
        return list(self.slo_files)

    def slo_count(self) -> int:
        return sum(len(slos) for slos in self.slo_files.values())
