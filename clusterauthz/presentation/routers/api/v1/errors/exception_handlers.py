"""Global exception handlers for FastAPI application.

Render framework-raised errors with the same ``{"error": [{"message"}]}``
body the endpoints use.

Handlers:
    http_exception_handler: HTTPException (401 from principal dependency, 404, ...)
    validation_exception_handler: RequestValidationError (malformed bodies)
    generic_exception_handler: Anything unhandled, as 500 without internals

Exports:
    register_exception_handlers: Register all exception handlers with FastAPI app
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

from clusterauthz.core.container import get_logger
from clusterauthz.schemas.authz_schemas import ErrorMessage, ErrorResponse


async def http_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Convert HTTPException to an error response, keeping its headers."""
    assert isinstance(exc, HTTPException)

    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse.of(
            exc.detail if isinstance(exc.detail, str) else str(exc.detail)
        ).model_dump(),
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(
    request: Request, exc: Exception
) -> JSONResponse:
    """Convert RequestValidationError to a 422 with one message per field.

    Example:
        >>> # {"error": [{"message": "permissions.0.action: Field required"}]}
    """
    assert isinstance(exc, RequestValidationError)

    messages: list[ErrorMessage] = []
    for error in exc.errors():
        loc = [str(p) for p in error.get("loc", []) if p != "body"]
        field_name = ".".join(loc) if loc else "body"
        messages.append(
            ErrorMessage(message=f"{field_name}: {error.get('msg', 'invalid value')}")
        )

    return JSONResponse(
        status_code=422,
        content=ErrorResponse(error=messages).model_dump(),
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions without leaking details."""
    get_logger().error(
        "unhandled_exception",
        error=exc,
        method=request.method,
        path=request.url.path,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=ErrorResponse.of("internal server error").model_dump(),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with FastAPI app."""
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
