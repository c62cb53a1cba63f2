"""Exception handlers mapping every failure onto the response envelope."""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from newsproxy.api.utils import error_response
from newsproxy.core.exceptions import ClientInputError
from newsproxy.core.logging import logger


def _describe_validation_error(exc: RequestValidationError) -> str:
    """Human-readable summary of the first invalid parameter."""
    errors = exc.errors()
    if not errors:
        return "Invalid request parameters"
    first = errors[0]
    location = first.get("loc", ())
    name = location[-1] if location else "parameter"
    return f"Invalid parameter '{name}': {first.get('msg', 'invalid value')}"


async def client_input_error_handler(request: Request, exc: ClientInputError):
    logger.info("client_input_rejected", path=request.url.path, reason=exc.message)
    return error_response(exc.status_code, exc.message)


async def validation_error_handler(request: Request, exc: RequestValidationError):
    message = _describe_validation_error(exc)
    logger.info("client_input_rejected", path=request.url.path, reason=message)
    return error_response(400, message)


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 404 and exc.detail == "Not Found":
        return error_response(404, "Route not found")
    return error_response(exc.status_code, str(exc.detail), headers=getattr(exc, "headers", None))


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error(
        "unhandled_exception",
        path=request.url.path,
        error_type=type(exc).__name__,
        error=str(exc),
    )
    return error_response(500, "Internal server error")


def register_exception_handlers(app: FastAPI) -> None:
    """Install envelope-producing exception handlers on ``app``."""
    app.add_exception_handler(ClientInputError, client_input_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
