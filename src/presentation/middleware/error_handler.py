"""Error handling middleware and exception handlers."""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
import structlog

from src.domain.exceptions import (
    DomainException,
    InvalidRequestException,
    RecordNotFoundException,
    StoreUnavailableException,
    TransactionalFailureException,
)
from .request_context import get_request_id

logger = structlog.get_logger(__name__)


def _error_response(status_code: int, code: str, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "success": False,
            "data": None,
            "error": code,
            "message": message,
            "request_id": get_request_id(),
        },
    )


def _describe_validation_errors(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        parts.append(f"{location}: {error.get('msg')}" if location else str(error.get("msg")))
    return "; ".join(parts) or "Invalid request"


def error_handler_middleware(app: FastAPI) -> None:
    """
    Register exception handlers with the FastAPI app.

    Maps domain exceptions to appropriate HTTP responses.
    """

    @app.exception_handler(RecordNotFoundException)
    async def not_found_handler(
        request: Request,
        exc: RecordNotFoundException,
    ) -> JSONResponse:
        """Handle missing record errors."""
        return _error_response(404, exc.code, exc.message)

    @app.exception_handler(InvalidRequestException)
    async def invalid_request_handler(
        request: Request,
        exc: InvalidRequestException,
    ) -> JSONResponse:
        """Handle invalid request errors."""
        return _error_response(400, exc.code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """Handle request body/query validation errors."""
        return _error_response(422, "VALIDATION_ERROR", _describe_validation_errors(exc))

    @app.exception_handler(TransactionalFailureException)
    async def transactional_failure_handler(
        request: Request,
        exc: TransactionalFailureException,
    ) -> JSONResponse:
        """Handle rolled back store transactions."""
        logger.error(
            "transactional_failure",
            request_id=get_request_id(),
            operation=exc.operation,
            reason=exc.reason,
        )
        return _error_response(409, exc.code, exc.message)

    @app.exception_handler(StoreUnavailableException)
    async def store_unavailable_handler(
        request: Request,
        exc: StoreUnavailableException,
    ) -> JSONResponse:
        """Handle store connectivity errors."""
        logger.error(
            "store_unavailable",
            request_id=get_request_id(),
            reason=exc.reason,
        )
        return _error_response(
            503,
            exc.code,
            "Service temporarily unavailable. Please try again.",
        )

    @app.exception_handler(DomainException)
    async def domain_exception_handler(
        request: Request,
        exc: DomainException,
    ) -> JSONResponse:
        """Handle generic domain exceptions."""
        logger.warning(
            "domain_exception",
            request_id=get_request_id(),
            code=exc.code,
            message=exc.message,
        )
        return _error_response(400, exc.code, exc.message)

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """Handle unexpected exceptions."""
        logger.exception(
            "unhandled_exception",
            request_id=get_request_id(),
            error=str(exc),
            error_type=type(exc).__name__,
        )
        return _error_response(500, "INTERNAL_ERROR", "An unexpected error occurred.")
