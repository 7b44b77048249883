# Standard library imports
import logging
from typing import Dict

# External package imports
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


def _field_errors(exception: RequestValidationError) -> Dict[str, str]:
    """Collapse pydantic error entries into a field -> message map"""
    errors: Dict[str, str] = {}
    for error in exception.errors():
        location = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")]
        field = ".".join(location) or "request"
        errors.setdefault(field, error.get("msg", "Invalid value"))
    return errors


async def request_validation_exception_handler(
    request: Request,
    exception: RequestValidationError,
) -> JSONResponse:
    """Malformed input -> 400 with per-field messages"""
    errors = _field_errors(exception)
    logger.warning(f"Validation failed for {request.method} {request.url.path}: {errors}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "detail": "Validation failed for one or more fields",
            "errors": errors,
        },
    )


async def unhandled_exception_handler(request: Request, exception: Exception) -> JSONResponse:
    """Anything unclassified -> opaque 500; details stay in the log"""
    logger.error(
        f"Unexpected error during {request.method} {request.url.path}: {exception}",
        exc_info=exception,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "An unexpected error occurred"},
    )


def register_exception_handlers(application: FastAPI) -> None:
    application.add_exception_handler(RequestValidationError, request_validation_exception_handler)
    application.add_exception_handler(Exception, unhandled_exception_handler)
