"""Logging for the booking API.

Every log line is a structlog event (``appointment_booked``,
``validation_failed``, ...) rendered as one JSON object on stdout, or as
colored key=value text when LOG_JSON is off for local runs. Events logged
while a request is being handled carry its ``request_id``, the same value
the client sees in the X-Request-ID response header.
"""
import logging
import sys
import uuid

import structlog


def setup_structured_logging(log_level: str = "INFO", json_logs: bool = True):
    """
    Route structlog and stdlib logging (uvicorn, store) to stdout.

    Args:
        log_level: Minimum level name, e.g. "DEBUG" to see cache hits
        json_logs: JSON lines when True, console renderer otherwise
    """
    renderer = (
        structlog.processors.JSONRenderer()
        if json_logs
        else structlog.dev.ConsoleRenderer()
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, log_level.upper())
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Module logger; pass ``__name__``."""
    return structlog.get_logger(name)


def generate_request_id() -> str:
    """New id of the form ``req-`` + 12 hex chars."""
    return f"req-{uuid.uuid4().hex[:12]}"


class RequestIDMiddleware:
    """
    Give each HTTP request an id and echo it in X-Request-ID.

    A non-empty X-Request-ID sent by the client (e.g. a proxy) is reused,
    otherwise one is generated. The id is stored on ``request.state`` and
    bound as ``request_id`` for every log event of the request.
    """

    header_name = b"x-request-id"

    def __init__(self, app):
        self.app = app

    def _incoming_id(self, scope):
        for name, value in scope.get("headers", []):
            if name.lower() == self.header_name:
                return value.decode("latin-1").strip() or None
        return None

    async def __call__(self, scope, receive, send):
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        request_id = self._incoming_id(scope) or generate_request_id()
        scope.setdefault("state", {})["request_id"] = request_id

        async def send_with_request_id(message):
            if message["type"] == "http.response.start":
                headers = list(message.get("headers", []))
                headers.append((self.header_name, request_id.encode("latin-1")))
                message["headers"] = headers
            await send(message)

        structlog.contextvars.bind_contextvars(request_id=request_id)
        try:
            await self.app(scope, receive, send_with_request_id)
        finally:
            structlog.contextvars.unbind_contextvars("request_id")
