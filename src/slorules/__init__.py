"""
slorules: multiwindow, multi-burn-rate SLO rule generation for Prometheus.
"""

from slorules.generators import assemble, build_document, generate
from slorules.specs import SloInput

__all__ = [
    "SloInput",
    "assemble",
    "build_document",
    "generate",
]
