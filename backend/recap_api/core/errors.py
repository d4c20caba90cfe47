import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from recap.errors import (
    EmptyGenerationError,
    InvalidInputError,
    NotFoundError,
    RecapError,
    UpstreamError,
)

_logger = logging.getLogger(__name__)

_STATUS_CODES: dict[type[RecapError], int] = {
    InvalidInputError: 400,
    NotFoundError: 404,
    UpstreamError: 500,
    EmptyGenerationError: 500,
}


def error_response(status_code: int, message: str) -> JSONResponse:
    """Failure payload shared by every route."""
    return JSONResponse(
        status_code=status_code, content={"success": False, "error": message}
    )


def status_code_for(exc: RecapError) -> int:
    for error_type, status_code in _STATUS_CODES.items():
        if isinstance(exc, error_type):
            return status_code
    return 500


async def recap_error_handler(request: Request, exc: RecapError) -> JSONResponse:
    status_code = status_code_for(exc)
    if status_code >= 500:
        _logger.error("%s %s failed: %s", request.method, request.url.path, exc)
    return error_response(status_code, str(exc))


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    fields = sorted(
        {
            ".".join(str(part) for part in error["loc"] if part != "body")
            for error in exc.errors()
        }
    )
    message = "Invalid parameters"
    if fields:
        message += f": {', '.join(field for field in fields if field)}"
    return error_response(400, message)


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    _logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return error_response(500, "Internal server error")


def register_exception_handlers(app: FastAPI) -> None:
    """Map domain errors and invalid bodies to {success: false, error} responses."""
    app.add_exception_handler(RecapError, recap_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, validation_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, unhandled_error_handler)
