"""Exception handlers mapping errors onto the error envelope."""
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from booking_api.api.responses import error_response
from booking_api.errors import BookingError, ValidationFailed
from booking_api.logging_config import get_logger

logger = get_logger(__name__)

# Location prefixes FastAPI adds to request validation errors
_LOCATION_PREFIXES = ("body", "query", "path", "header")


def format_validation_errors(exc: RequestValidationError) -> list:
    """Turn pydantic error dicts into 'field: message' strings."""
    messages = []
    for err in exc.errors():
        loc = [str(part) for part in err.get("loc", ()) if part not in _LOCATION_PREFIXES]
        field = ".".join(loc)
        text = err.get("msg", "Invalid value")
        messages.append(f"{field}: {text}" if field else text)
    return messages


def register_exception_handlers(app: FastAPI) -> None:
    """Install the envelope-producing handlers on ``app``."""

    @app.exception_handler(ValidationFailed)
    async def validation_failed_handler(request: Request, exc: ValidationFailed):
        logger.info("validation_failed", path=request.url.path, errors=exc.errors)
        return error_response(exc.status_code, exc.message, errors=exc.errors)

    @app.exception_handler(BookingError)
    async def booking_error_handler(request: Request, exc: BookingError):
        logger.info(
            "request_rejected",
            path=request.url.path,
            status_code=exc.status_code,
            error=exc.error,
        )
        return error_response(exc.status_code, exc.message, error=exc.error)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        """Malformed bodies, non-numeric path ids and the like are 400s."""
        errors = format_validation_errors(exc)
        logger.info("validation_failed", path=request.url.path, errors=errors)
        return error_response(
            status.HTTP_400_BAD_REQUEST, "Validation failed", errors=errors
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code == status.HTTP_404_NOT_FOUND:
            return error_response(
                exc.status_code,
                "Route not found",
                error=f"Cannot {request.method} {request.url.path}",
            )
        return error_response(
            exc.status_code,
            str(exc.detail),
            error=f"{request.method} {request.url.path}",
            headers=getattr(exc, "headers", None),
        )


class UnhandledErrorMiddleware:
    """
    ASGI middleware turning uncaught exceptions into a 500 envelope.

    Added innermost so the response still passes through RequestIDMiddleware
    and CORS. A handler registered for ``Exception`` would run in Starlette's
    outermost ServerErrorMiddleware instead and skip both.
    """

    def __init__(self, app):
        self.app = app

    async def __call__(self, scope, receive, send):
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        response_started = False

        async def send_tracking_start(message):
            nonlocal response_started
            if message["type"] == "http.response.start":
                response_started = True
            await send(message)

        try:
            await self.app(scope, receive, send_tracking_start)
        except Exception as exc:
            if response_started:
                raise
            logger.error("unhandled_error", path=scope.get("path"), exc_info=exc)
            response = error_response(
                status.HTTP_500_INTERNAL_SERVER_ERROR,
                "Something went wrong!",
                error=str(exc),
            )
            await response(scope, receive, send)
