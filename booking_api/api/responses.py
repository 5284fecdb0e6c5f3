"""Response envelope helpers.

Every response carries ``success`` and ``message``, plus one of
``data`` (single record), ``data`` + ``count`` (unpaginated collection),
``results`` + pagination fields, or ``error``/``errors``.
"""
from typing import Any, Dict, List, Optional, Sequence

from fastapi.responses import JSONResponse

from booking_api.api.models import ErrorResponse


def success_envelope(message: str, **fields: Any) -> Dict[str, Any]:
    return {"success": True, "message": message, **fields}


def record_envelope(message: str, record: Dict[str, Any]) -> Dict[str, Any]:
    return success_envelope(message, data=record)


def collection_envelope(message: str, records: Sequence[Dict[str, Any]]) -> Dict[str, Any]:
    return success_envelope(message, data=list(records), count=len(records))


def paginated_envelope(message: str, page_payload: Dict[str, Any]) -> Dict[str, Any]:
    """Merge a pagination payload (results, total, page, ...) into the envelope."""
    return success_envelope(message, **page_payload)


def error_response(
    status_code: int,
    message: str,
    error: Optional[str] = None,
    errors: Optional[List[str]] = None,
    headers: Optional[Dict[str, str]] = None
) -> JSONResponse:
    body = ErrorResponse(message=message, error=error, errors=errors)
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(exclude_none=True),
        headers=headers,
    )
