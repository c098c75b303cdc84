"""Multiwindow, multi-burn-rate rule generation for a single SLO."""

from typing import List, Tuple

from slorules.alerts.models import AlertRule
from slorules.generators.windows import (
    ALERT_WINDOWS,
    BASE_WINDOW,
    LONG_WINDOWS,
    SHORT_WINDOWS,
    AlertWindow,
    ratio_windows,
)
from slorules.recording_rules.models import RecordingRule
from slorules.specs.models import RANGE_PLACEHOLDER, SloInput

SUCCESSFUL_REQUESTS = "successful_requests_total"
TOTAL_REQUESTS = "requests_total"
SUCCESS_PER_REQUEST = "success_per_request"

# Metrics averaged from the base window into every long window
DERIVED_METRICS = (SUCCESSFUL_REQUESTS, TOTAL_REQUESTS, SUCCESS_PER_REQUEST)


class BurnRateRuleBuilder:
    """Builds recording and alerting rules for one SLO.

    Short windows are computed from the raw queries, long windows are
    averaged over the 1h rule, and alerts combine a long and a short
    window success ratio per burn-rate tier.
    """

    def __init__(self, slo: SloInput):
        self.slo = slo
        self.prefix = slo.metric_prefix

    def build(self) -> Tuple[List[RecordingRule], List[AlertRule]]:
        """Build all rules for the SLO.

        Returns:
            Tuple of (recording rules, alert rules)
        """
        recording_rules: List[RecordingRule] = []
        recording_rules.extend(self._build_base_rate_rules())
        recording_rules.extend(self._build_long_window_rules())
        recording_rules.extend(self._build_ratio_rules())

        alert_rules = [self._build_alert(window) for window in ALERT_WINDOWS]

        return recording_rules, alert_rules

    def rate_record(self, metric: str, window: str) -> str:
        return f"{self.prefix}_{metric}:rate{window}"

    def ratio_record(self, window: str) -> str:
        return f"{self.prefix}_{SUCCESS_PER_REQUEST}:ratio_rate{window}"

    def _build_base_rate_rules(self) -> List[RecordingRule]:
        """Numerator and denominator rates for each short window."""
        rules = []

        for window in SHORT_WINDOWS:
            rules.append(
                RecordingRule(
                    record=self.rate_record(SUCCESSFUL_REQUESTS, window),
                    expr=self.slo.success_query.replace(RANGE_PLACEHOLDER, window),
                )
            )
            rules.append(
                RecordingRule(
                    record=self.rate_record(TOTAL_REQUESTS, window),
                    expr=self.slo.total_query.replace(RANGE_PLACEHOLDER, window),
                )
            )

        return rules

    def _build_long_window_rules(self) -> List[RecordingRule]:
        """Long window rates as averages of the base window rates."""
        rules = []

        for window in LONG_WINDOWS:
            for metric in DERIVED_METRICS:
                rules.append(
                    RecordingRule(
                        record=self.rate_record(metric, window),
                        expr=f"avg_over_time({self.rate_record(metric, BASE_WINDOW)}[{window}])",
                    )
                )

        return rules

    def _build_ratio_rules(self) -> List[RecordingRule]:
        """Success ratio for every short and long window."""
        return [
            RecordingRule(
                record=self.ratio_record(window),
                expr=(
                    f"({self.rate_record(SUCCESSFUL_REQUESTS, window)} / "
                    f"{self.rate_record(TOTAL_REQUESTS, window)})"
                ),
            )
            for window in ratio_windows()
        ]

    def _burn_condition(self, period: str, window: AlertWindow) -> str:
        return (
            f"(1 - {self.ratio_record(period)}) * 100 > "
            f"(100 - {self.slo.threshold}) * {window.factor_text}"
        )

    def _build_alert(self, window: AlertWindow) -> AlertRule:
        """Alert that fires when both windows burn faster than the tier allows."""
        long_condition = self._burn_condition(window.long_period, window)
        short_condition = self._burn_condition(window.short_period, window)

        return AlertRule(
            name=self.slo.alertname,
            expr=f"(({long_condition}) and ({short_condition}))",
            duration=window.for_period,
            labels={
                "severity": window.severity,
                "period": window.long_period,
            },
            annotations={
                "summary": self.slo.alert_summary,
                "description": (
                    f"{{{{ $value | printf `%.2f` }}}}% of {{{{ $labels.job }}}}'s requests "
                    f"in the last {window.long_period} are failing or too slow to meet the SLO."
                ),
            },
        )


def generate(slo: SloInput) -> Tuple[List[RecordingRule], List[AlertRule]]:
    """Generate the recording and alerting rules for one SLO.

    Args:
        slo: SLO definition

    Returns:
        Tuple of (recording rules, alert rules)

    Example:
        >>> recording, alerts = generate(slo)
        >>> len(recording), len(alerts)
        (25, 4)
    """
    return BurnRateRuleBuilder(slo).build()
