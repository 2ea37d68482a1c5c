from __future__ import annotations

from http import HTTPStatus
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from api_scaffold.services.errors import ApplicationError, BadRequestError
from api_scaffold.services.translator import GenericFailure, TranslatedError, translate
from api_scaffold.settings import Settings

logger = logging.getLogger(__name__)


def _json(response: TranslatedError, headers: dict[str, str] | None = None) -> JSONResponse:
    return JSONResponse(status_code=response.status_code, content=response.body, headers=headers)


def _phrase(status_code: int) -> str:
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return "HTTP error"


def _validation_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()) if part is not None)
    detail = first.get("msg", "invalid value")
    return f"Invalid request: {location}: {detail}" if location else f"Invalid request: {detail}"


def register_error_handlers(app: FastAPI, settings: Settings) -> None:
    """Install the translator as the last stop for every failed request."""
    expose = settings.expose_error_details

    @app.exception_handler(ApplicationError)
    async def handle_application_error(request: Request, exc: ApplicationError) -> JSONResponse:
        logger.warning(
            "%s %s -> %s %s",
            request.method,
            request.url.path,
            exc.status_code,
            exc.message,
        )
        return _json(translate(exc, expose_internal_messages=expose))

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        detail = str(exc.detail).strip() if exc.detail is not None else ""
        logger.warning("%s %s -> %s %s", request.method, request.url.path, exc.status_code, detail)
        if not 100 <= exc.status_code <= 599:
            return _json(translate(GenericFailure(message=detail or None), expose_internal_messages=expose))
        failure = ApplicationError(exc.status_code, detail or _phrase(exc.status_code))
        return _json(translate(failure, expose_internal_messages=expose), headers=exc.headers)

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
        failure = BadRequestError(_validation_message(exc))
        logger.warning("%s %s -> %s %s", request.method, request.url.path, failure.status_code, failure.message)
        return _json(translate(failure, expose_internal_messages=expose))

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
        logger.error(
            "Unhandled %s on %s %s",
            type(exc).__name__,
            request.method,
            request.url.path,
            exc_info=exc,
        )
        return _json(translate(exc, expose_internal_messages=expose))
