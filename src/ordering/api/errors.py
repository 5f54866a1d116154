"""Translate domain exceptions into HTTP responses.

Every error body has the shape ``{"error": ...}``: a mapping of field to
messages for client errors, a fixed string for server errors.
"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from protean.exceptions import ObjectNotFoundError, ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from ordering.errors import NotFoundError
from ordering.utils.logging import get_logger

logger = get_logger(__name__)


def _error(status_code: int, error) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": error})


def _request_validation_messages(exc: RequestValidationError) -> dict:
    messages: dict[str, list[str]] = {}
    for error in exc.errors():
        location = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path", "header")]
        field = location[-1] if location else "request"
        messages.setdefault(field, []).append(error.get("msg", "Invalid value"))
    return messages


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        logger.info("Request rejected", path=request.url.path, errors=exc.messages)
        return _error(400, exc.messages)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError):
        return _error(400, _request_validation_messages(exc))

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        return _error(404, exc.messages)

    @app.exception_handler(ObjectNotFoundError)
    async def handle_object_not_found(request: Request, exc: ObjectNotFoundError):
        return _error(404, {"resource": ["Resource not found"]})

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        return _error(exc.status_code, exc.detail)

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception):
        logger.exception("Unhandled error", path=request.url.path)
        return _error(500, "Internal server error")
