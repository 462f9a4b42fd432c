"""
Global exception handlers mapping use case outcomes to HTTP responses.

    InvalidInputError, RequestValidationError -> 422 with field-level details
    ConflictError                             -> 409
    InternalError, any other Exception        -> 500, no internal detail
"""

# Standard library imports
import logging

# External package imports
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

# Local application imports
from ..application.exceptions import (
    ConflictError,
    InternalError,
    InvalidInputError,
    UserServiceError,
)
from ..application.validation import translate_errors

logger = logging.getLogger(__name__)

UNPROCESSABLE_CONTENT = 422


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""

    @app.exception_handler(InvalidInputError)
    async def invalid_input_handler(request: Request, exc: InvalidInputError) -> JSONResponse:
        logger.warning(f"Invalid input on {request.method} {request.url.path}: {exc.details[0].message}")
        return JSONResponse(
            status_code=UNPROCESSABLE_CONTENT,
            content={
                "message": exc.code,
                "details": [detail.to_dict() for detail in exc.details],
            },
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.warning(f"Malformed request on {request.method} {request.url.path}: {exc.errors()}")
        return JSONResponse(
            status_code=UNPROCESSABLE_CONTENT,
            content={
                "message": InvalidInputError.code,
                "details": [detail.to_dict() for detail in translate_errors(exc.errors())],
            },
        )

    @app.exception_handler(ConflictError)
    async def conflict_handler(request: Request, exc: ConflictError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_409_CONFLICT,
            content={"message": exc.code},
        )

    @app.exception_handler(InternalError)
    async def internal_error_handler(request: Request, exc: InternalError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": exc.code},
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error(f"Unhandled exception on {request.method} {request.url.path}: {exc}", exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": UserServiceError.code},
        )
