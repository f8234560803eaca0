"""Error rendering for API v1.

Exports:
    ErrorResponseBuilder: Maps application errors to HTTP responses
    register_exception_handlers: Installs framework exception handlers
"""

from clusterauthz.presentation.routers.api.v1.errors.error_response_builder import (
    ErrorResponseBuilder,
)
from clusterauthz.presentation.routers.api.v1.errors.exception_handlers import (
    register_exception_handlers,
)

__all__ = ["ErrorResponseBuilder", "register_exception_handlers"]
