
import pytest
import structlog
from fastapi.testclient import TestClient

from roll_pricing.main import app


@pytest.fixture(autouse=True)
def configure_structlog_for_tests():
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.dev.ConsoleRenderer(),
        ],
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client
