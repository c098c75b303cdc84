"""
Alert Rule Models

Burn-rate alerting rules derived from SLO definitions.
"""

from .models import AlertRule

__all__ = ["AlertRule"]
