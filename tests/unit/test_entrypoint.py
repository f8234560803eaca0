"""Unit tests for the uvicorn entry point."""

from unittest.mock import patch

import pytest

from clusterauthz import __main__ as entrypoint
from clusterauthz.core.config import Settings


@pytest.mark.unit
class TestEntrypoint:
    """Test the server is started from settings."""

    def test_runs_app_on_configured_address(self):
        settings = Settings(api_host="127.0.0.1", api_port=9000, log_level="WARNING")

        with (
            patch.object(entrypoint, "settings", settings),
            patch.object(entrypoint.uvicorn, "run") as run,
        ):
            entrypoint.main()

        run.assert_called_once_with(
            "clusterauthz.main:app",
            host="127.0.0.1",
            port=9000,
            log_level="warning",
        )
