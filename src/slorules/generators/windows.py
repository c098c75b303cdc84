"""
Window and burn-rate tables for multiwindow, multi-burn-rate SLO alerting.

See https://sre.google/workbook/alerting-on-slos/ for the methodology.
"""

from __future__ import annotations

from dataclasses import dataclass


# Windows computed directly from the raw success/total queries
SHORT_WINDOWS: tuple[str, ...] = ("5m", "30m", "1h")

# Windows averaged over the 1h recording rules
LONG_WINDOWS: tuple[str, ...] = ("2h", "6h", "1d", "3d")

# The short window every long window is derived from
BASE_WINDOW = "1h"


@dataclass(frozen=True)
class AlertWindow:
    """
    One burn-rate alert tier.

    The alert fires when both the long and the short window burn the error
    budget faster than ``factor`` times the sustainable rate.
    """

    long_period: str
    short_period: str
    for_period: str
    factor: float
    severity: str

    @property
    def factor_text(self) -> str:
        """Burn factor as rendered in expressions (one decimal place)."""
        return f"{self.factor:.1f}"


ALERT_WINDOWS: tuple[AlertWindow, ...] = (
    AlertWindow(long_period="1h", short_period="5m", for_period="2m", factor=14.4, severity="critical"),
    AlertWindow(long_period="6h", short_period="30m", for_period="15m", factor=6, severity="critical"),
    AlertWindow(long_period="1d", short_period="2h", for_period="1h", factor=3, severity="warning"),
    AlertWindow(long_period="3d", short_period="6h", for_period="3h", factor=1, severity="warning"),
)


def ratio_windows() -> tuple[str, ...]:
    """All windows that get a success ratio rule, short windows first."""
    return SHORT_WINDOWS + LONG_WINDOWS


def expected_rule_counts() -> tuple[int, int]:
    """Number of (recording, alert) rules generated per SLO."""
    recording = 2 * len(SHORT_WINDOWS) + 3 * len(LONG_WINDOWS) + len(ratio_windows())
    return recording, len(ALERT_WINDOWS)
