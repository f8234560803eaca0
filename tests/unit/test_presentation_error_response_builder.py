"""Unit tests for ErrorResponseBuilder."""

import json

import pytest

from clusterauthz.application.errors import ApplicationError, ApplicationErrorCode
from clusterauthz.presentation.routers.api.v1.errors import ErrorResponseBuilder


@pytest.mark.unit
class TestErrorResponseBuilder:
    """Test application error rendering."""

    @pytest.mark.parametrize(
        ("code", "status_code"),
        [
            (ApplicationErrorCode.COMMAND_VALIDATION_FAILED, 400),
            (ApplicationErrorCode.FORBIDDEN, 403),
            (ApplicationErrorCode.NOT_FOUND, 404),
            (ApplicationErrorCode.COMMAND_EXECUTION_FAILED, 500),
            (ApplicationErrorCode.QUERY_FAILED, 500),
            (ApplicationErrorCode.SERVICE_UNAVAILABLE, 503),
        ],
    )
    def test_status_codes(self, code, status_code):
        response = ErrorResponseBuilder.from_application_error(
            ApplicationError(code=code, message="some message")
        )

        assert response.status_code == status_code
        assert json.loads(response.body) == {"error": [{"message": "some message"}]}

    def test_retry_after_only_on_503(self):
        unavailable = ErrorResponseBuilder.from_application_error(
            ApplicationError(code=ApplicationErrorCode.SERVICE_UNAVAILABLE, message="x")
        )
        forbidden = ErrorResponseBuilder.from_application_error(
            ApplicationError(code=ApplicationErrorCode.FORBIDDEN, message="x")
        )

        assert unavailable.headers["Retry-After"] == "1"
        assert "Retry-After" not in forbidden.headers
