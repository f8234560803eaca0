"""Pytest configuration and shared fixtures.

Fixtures:
- mock_logger: LoggerProtocol double whose bind() returns itself
- enforcer: in-memory casbin Enforcer loaded with the production model
"""

import inspect
from unittest.mock import Mock

import casbin
import pytest

from clusterauthz.core.container.authorization import MODEL_PATH


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line("markers", "api: HTTP tests through the FastAPI app")
    config.addinivalue_line(
        "markers", "integration: Integration tests with a real policy database"
    )


def pytest_collection_modifyitems(config, items):
    """Automatically add asyncio marker to async test functions."""
    for item in items:
        if inspect.iscoroutinefunction(getattr(item, "function", None)):
            item.add_marker(pytest.mark.asyncio)


@pytest.fixture
def mock_logger():
    """Logger double. ``bind`` returns the same mock so bound calls are visible."""
    logger = Mock()
    logger.bind.return_value = logger
    return logger


@pytest.fixture
def enforcer():
    """In-memory casbin enforcer using the application's model."""
    return casbin.Enforcer(str(MODEL_PATH))
