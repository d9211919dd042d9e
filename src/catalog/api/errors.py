"""Exception handlers rendering every failure as the error envelope."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from catalog.core.exceptions import AppError, UnexpectedError, ValidationError
from catalog.schemas.common import MessageResponse

logger = logging.getLogger(__name__)


def error_response(status_code: int, message: str) -> JSONResponse:
    """Build a ``{success: false, message}`` response."""
    return JSONResponse(
        status_code=status_code,
        content=MessageResponse(success=False, message=message).model_dump(),
    )


def _field_name(loc: tuple) -> str:
    # Drop the "body" prefix FastAPI puts in front of payload fields
    parts = [str(part) for part in loc if part != "body"]
    return ".".join(parts) or "body"


def field_errors(exc: RequestValidationError) -> list[tuple[str, str]]:
    """Flatten FastAPI validation errors into ``(field, reason)`` pairs."""
    errors = []
    for error in exc.errors():
        if error.get("type") == "json_invalid":
            errors.append(("body", "Malformed JSON body"))
            continue
        reason = error.get("msg", "Invalid value")
        errors.append((_field_name(tuple(error.get("loc", ()))), reason))
    return errors


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    return error_response(exc.status_code, exc.message)


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    error = ValidationError(field_errors(exc))
    logger.info(f"Rejected {request.method} {request.url.path}: {error.message}")
    return error_response(error.status_code, error.message)


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    response = error_response(exc.status_code, str(exc.detail))
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")
    error = UnexpectedError()
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, error.message)


def register_exception_handlers(app: FastAPI) -> None:
    """Install the envelope-producing handlers on the application."""
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
