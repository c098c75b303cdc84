"""
Alert Rule Models

Data models for representing burn-rate alerting rules.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping


@dataclass(frozen=True)
class AlertRule:
    """
    Prometheus alerting rule.

    Serializes to the Prometheus alerting rule shape:
        {
            "alert": "APIAvailability",
            "expr": "(((1 - ...) * 100 > (100 - 99.9) * 14.4) and (...))",
            "for": "2m",
            "labels": {"period": "1h", "severity": "critical"},
            "annotations": {"description": "...", "summary": "..."}
        }
    """

    name: str
    expr: str  # PromQL expression
    duration: str  # How long condition must be true
    labels: Mapping[str, str] = field(default_factory=dict, hash=False)
    annotations: Mapping[str, str] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        # Read-only views over private copies
        object.__setattr__(self, "labels", MappingProxyType(dict(self.labels)))
        object.__setattr__(self, "annotations", MappingProxyType(dict(self.annotations)))

    @property
    def severity(self) -> str:
        return self.labels.get("severity", "")

    @property
    def period(self) -> str:
        return self.labels.get("period", "")

    def is_critical(self) -> bool:
        """Check if alert is critical severity"""
        return self.severity == "critical"

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to Prometheus YAML format.

        Label and annotation keys are emitted in sorted order so repeated
        generation produces byte-identical files.
        """
        return {
            "alert": self.name,
            "expr": self.expr,
            "for": self.duration,
            "labels": dict(sorted(self.labels.items())),
            "annotations": dict(sorted(self.annotations.items())),
        }

    def __repr__(self) -> str:
        return f"AlertRule(name='{self.name}', severity='{self.severity}', period='{self.period}')"
