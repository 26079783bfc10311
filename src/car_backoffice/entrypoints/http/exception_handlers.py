"""FastAPI exception handlers.

Every failure leaves the API as an ``ErrorResponse`` body. Domain errors
choose their status through ``STATUS_CODES``; request-shape errors and stray
``ValueError`` become 422; anything else is a logged 500.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from car_backoffice.domain.errors import DomainError
from car_backoffice.entrypoints.http.error_responses import ErrorDetail, ErrorResponse

logger = logging.getLogger(__name__)

STATUS_CODES: dict[str, int] = {
    "VALIDATION_ERROR": 422,  # HTTP_422_UNPROCESSABLE_CONTENT
    "NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "CONFLICT": status.HTTP_409_CONFLICT,
    "UNAUTHORIZED": status.HTTP_401_UNAUTHORIZED,
    "FORBIDDEN": status.HTTP_403_FORBIDDEN,
    "CASCADE_FAILED": status.HTTP_500_INTERNAL_SERVER_ERROR,
    "INTERNAL_ERROR": status.HTTP_500_INTERNAL_SERVER_ERROR,
}

# Location prefixes FastAPI puts in front of the offending field name
_LOCATIONS = frozenset({"body", "query", "path", "header"})


def _request_fields(request: Request) -> dict[str, Any]:
    return {
        "path": request.url.path,
        "method": request.method,
        "actor_id": request.headers.get("x-actor-id"),
    }


def _respond(
    status_code: int,
    detail: str,
    code: str,
    errors: list[dict[str, Any]] | None = None,
) -> JSONResponse:
    body = ErrorResponse(
        detail=detail,
        code=code,
        errors=[ErrorDetail(**error) for error in errors] if errors else None,
    )
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


async def handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
    """Translate a domain error; unmapped codes fall back to 400.

    Server-side failures (cascade, internal) are logged at error level with
    their context and traceback. Client errors are logged at info.
    """
    status_code = STATUS_CODES.get(exc.error_code, status.HTTP_400_BAD_REQUEST)
    fields = {
        "error_code": exc.error_code,
        "error_message": exc.message,
        **_request_fields(request),
    }

    if status_code >= 500:
        logger.error("Domain error occurred", exc_info=exc, extra={**fields, "context": exc.context})
    else:
        logger.info("Client error", extra=fields)

    errors = exc.to_dict().get("errors")
    return _respond(status_code, exc.message, exc.error_code, errors)


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Shape errors caught by FastAPI before any use case runs.

    Examples:
        - price_min=abc (not an integer)
        - limit=500 (above the page size cap)
        - Missing customer_phone in an inquiry body
    """
    errors = [
        {
            "field": ".".join(str(loc) for loc in error["loc"] if loc not in _LOCATIONS),
            "message": error["msg"],
            "code": error["type"],
        }
        for error in exc.errors()
    ]

    logger.info("Request validation error", extra={"errors": errors, **_request_fields(request)})

    return _respond(422, "Invalid request parameters", "VALIDATION_ERROR", errors)


async def handle_value_error(request: Request, exc: ValueError) -> JSONResponse:
    """ValueError escaping a mapper or an enum conversion."""
    logger.info("Value error", extra={"error_message": str(exc), **_request_fields(request)})

    return _respond(422, str(exc), "INVALID_VALUE")


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    """Anything else is a bug or an infrastructure failure; the cause stays in the logs."""
    logger.error(
        "Unexpected error occurred",
        exc_info=exc,
        extra={
            "error_type": type(exc).__name__,
            "error_message": str(exc),
            **_request_fields(request),
        },
    )

    return _respond(
        status.HTTP_500_INTERNAL_SERVER_ERROR, "An unexpected error occurred", "INTERNAL_ERROR"
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Call once while building the app."""
    app.add_exception_handler(DomainError, handle_domain_error)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)  # type: ignore[arg-type]
    app.add_exception_handler(ValueError, handle_value_error)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, handle_unexpected_error)

    logger.debug("Exception handlers registered")
