"""Root test configuration."""

import logging

import pytest
import structlog
from slorules.specs.models import SloInput


def pytest_configure(config):
    """Configure structlog for tests to suppress debug/info output."""
    logging.basicConfig(level=logging.WARNING, force=True)
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.processors.add_log_level,
            structlog.processors.format_exc_info,
            structlog.dev.ConsoleRenderer(),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )


@pytest.fixture
def api_slo():
    """Availability SLO for the api service."""
    return SloInput(
        service="api",
        slo_name="avail",
        alertname="APIAvailability",
        alert_summary="API availability low",
        success_query="sum(rate(http_success[$__range]))",
        total_query="sum(rate(http_total[$__range]))",
        threshold="99.5",
    )


@pytest.fixture
def config_yaml(tmp_path):
    """Write an SLO config file and return its path."""

    def _write(content: str, name: str = "prometheus-slo.yaml"):
        path = tmp_path / name
        path.write_text(content)
        return path

    return _write
