"""FastAPI dependency injection functions.

Repositories and the response cache live on ``app.state`` (set up by
create_app), so each app instance (and each test) has its own stores.
"""
from typing import Any, Callable, Dict

from fastapi import Request
from fastapi.responses import JSONResponse

from booking_api.cache import ResponseCache
from booking_api.logging_config import get_logger
from booking_api.store import AppointmentRepository, DoctorRepository

logger = get_logger(__name__)


def get_doctor_repository(request: Request) -> DoctorRepository:
    return request.app.state.doctors


def get_appointment_repository(request: Request) -> AppointmentRepository:
    return request.app.state.appointments


def get_response_cache(request: Request) -> ResponseCache:
    return request.app.state.cache


def cached_json(
    request: Request,
    cache: ResponseCache,
    build: Callable[[], Dict[str, Any]]
) -> JSONResponse:
    """
    Serve a list payload from the cache, building and storing it on a miss.

    Args:
        request: Incoming request (path + query string form the key)
        cache: Response cache
        build: Runs the filter/pagination pipeline; may raise, in which
            case nothing is cached

    Returns:
        JSONResponse with an X-Cache: HIT or MISS header
    """
    key = cache.make_key(request.url.path, request.url.query)
    generation = cache.generation
    payload = cache.get(key)
    if payload is not None:
        logger.debug("cache_hit", key=key)
        return JSONResponse(payload, headers={"X-Cache": "HIT"})

    payload = build()
    if not cache.set(key, payload, generation=generation):
        logger.debug("cache_store_skipped", key=key, reason="cleared_during_build")
    return JSONResponse(payload, headers={"X-Cache": "MISS"})
