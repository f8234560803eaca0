"""Error response builder.

Converts application layer errors into ``{"error": [{"message": ...}]}``
JSON responses with the status code of the error's outcome class.

Exports:
    ErrorResponseBuilder: Utility class for building error responses
"""

from fastapi import status
from fastapi.responses import JSONResponse

from clusterauthz.application.errors import ApplicationError, ApplicationErrorCode
from clusterauthz.core.container import get_logger
from clusterauthz.schemas.authz_schemas import ErrorResponse

# Seconds a client should wait before retrying a 503
RETRY_AFTER_SECONDS = 1


class ErrorResponseBuilder:
    """Build error responses from application errors.

    Example:
        >>> error = ApplicationError(
        ...     code=ApplicationErrorCode.FORBIDDEN,
        ...     message="authorization, forbidden action: ...",
        ... )
        >>> response = ErrorResponseBuilder.from_application_error(error)
        >>> response.status_code
        403
    """

    @staticmethod
    def from_application_error(error: ApplicationError) -> JSONResponse:
        """Convert ApplicationError to a JSON response.

        The message is passed through verbatim.

        Args:
            error: Application layer error to convert.

        Returns:
            JSONResponse with ErrorResponse content. 503 responses carry a
            Retry-After header.
        """
        status_code = ErrorResponseBuilder.get_status_code(error.code)

        if status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
            get_logger().error(
                "request_failed",
                status_code=status_code,
                error_code=error.code.value,
                reason=error.message,
            )

        headers = None
        if status_code == status.HTTP_503_SERVICE_UNAVAILABLE:
            headers = {"Retry-After": str(RETRY_AFTER_SECONDS)}

        return JSONResponse(
            status_code=status_code,
            content=ErrorResponse.of(error.message).model_dump(),
            headers=headers,
        )

    @staticmethod
    def get_status_code(code: ApplicationErrorCode) -> int:
        """Map application error code to HTTP status code.

        Example:
            >>> ErrorResponseBuilder.get_status_code(ApplicationErrorCode.NOT_FOUND)
            404
        """
        mapping = {
            ApplicationErrorCode.COMMAND_VALIDATION_FAILED: status.HTTP_400_BAD_REQUEST,
            ApplicationErrorCode.COMMAND_EXECUTION_FAILED: status.HTTP_500_INTERNAL_SERVER_ERROR,
            ApplicationErrorCode.QUERY_FAILED: status.HTTP_500_INTERNAL_SERVER_ERROR,
            ApplicationErrorCode.FORBIDDEN: status.HTTP_403_FORBIDDEN,
            ApplicationErrorCode.NOT_FOUND: status.HTTP_404_NOT_FOUND,
            ApplicationErrorCode.SERVICE_UNAVAILABLE: status.HTTP_503_SERVICE_UNAVAILABLE,
        }
        return mapping.get(code, status.HTTP_500_INTERNAL_SERVER_ERROR)
