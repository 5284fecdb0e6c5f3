"""FastAPI server for the doctor/appointment booking API.

Features:
- CORS middleware
- Request IDs + structured logging
- Envelope-shaped error handling (400/404/409/500)
- TTL response cache on list endpoints, cleared on every write
- OpenAPI docs at /api-docs

Usage:
    booking-api                      # or
    uvicorn booking_api.api_server:app --port 3000
"""
from contextlib import asynccontextmanager
from datetime import datetime, UTC
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from booking_api import __version__, config, seed_data
from booking_api.api import appointments as appointment_routes
from booking_api.api import doctors as doctor_routes
from booking_api.api.errors import UnhandledErrorMiddleware, register_exception_handlers
from booking_api.cache import ResponseCache
from booking_api.logging_config import RequestIDMiddleware, get_logger, setup_structured_logging
from booking_api.store import AppointmentRepository, DoctorRepository, RecordStore

setup_structured_logging(config.LOG_LEVEL, json_logs=config.LOG_JSON)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup/shutdown logging."""
    logger.info(
        "server_starting",
        doctors=len(app.state.doctors.store),
        appointments=len(app.state.appointments.store),
        cache_ttl=app.state.cache.ttl,
        docs=config.DOCS_URL,
    )
    yield
    logger.info("server_stopping")


def create_app(
    doctor_repo: Optional[DoctorRepository] = None,
    appointment_repo: Optional[AppointmentRepository] = None,
    cache: Optional[ResponseCache] = None,
    seed: bool = config.SEED_DATA
) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        doctor_repo: Doctor repository (new in-memory one if omitted)
        appointment_repo: Appointment repository (new in-memory one if omitted)
        cache: Response cache for list endpoints
        seed: Load the sample doctors/appointments into new repositories

    Returns:
        Configured FastAPI app
    """
    if doctor_repo is None:
        doctor_repo = DoctorRepository(RecordStore(seed_data.DOCTORS if seed else None))
    if appointment_repo is None:
        appointment_repo = AppointmentRepository(
            RecordStore(seed_data.APPOINTMENTS if seed else None)
        )
    if cache is None:
        cache = ResponseCache(ttl=config.CACHE_TTL_SECONDS, max_size=config.CACHE_MAX_SIZE)

    app = FastAPI(
        title=config.API_TITLE,
        description="Manage doctors and book appointments (in-memory storage)",
        version=__version__,
        lifespan=lifespan,
        docs_url=config.DOCS_URL,
        redoc_url="/redoc",
    )
    app.state.doctors = doctor_repo
    app.state.appointments = appointment_repo
    app.state.cache = cache

    # Last added runs first: RequestID -> CORS -> UnhandledError -> routes
    app.add_middleware(UnhandledErrorMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID", "X-Cache"],
    )
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    app.include_router(doctor_routes.router)
    app.include_router(appointment_routes.router)

    @app.get("/health", tags=["Health"])
    def health_check():
        """Health check endpoint for load balancers."""
        return {
            "status": "OK",
            "message": f"{config.API_TITLE} is running",
            "timestamp": datetime.now(UTC).isoformat(),
            "doctors": len(app.state.doctors.store),
            "appointments": len(app.state.appointments.store),
            "cache_size": len(app.state.cache),
        }

    @app.get("/", tags=["Root"])
    def root():
        """Root endpoint with API info."""
        return {
            "message": f"Welcome to {config.API_TITLE}",
            "version": __version__,
            "documentation": config.DOCS_URL,
            "endpoints": {
                "doctors": "/api/doctors",
                "appointments": "/api/appointments",
                "health": "/health",
            },
        }

    return app


app = create_app()


def main():
    """Run the API with uvicorn."""
    uvicorn.run(
        "booking_api.api_server:app",
        host=config.API_HOST,
        port=config.API_PORT,
        log_level=config.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
