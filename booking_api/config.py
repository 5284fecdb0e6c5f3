"""Configuration for the doctor/appointment booking API.

All tunables centralized here - override via environment or a .env file.
"""
import os
from dotenv import load_dotenv

load_dotenv()


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


# Server
API_HOST = os.getenv("API_HOST", "0.0.0.0")
API_PORT = int(os.getenv("API_PORT", "3000"))
API_TITLE = "Doctor-Patient Booking API"
DOCS_URL = "/api-docs"

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
# JSON lines (default) or human-readable console output
LOG_JSON = _env_bool("LOG_JSON", True)

# Response cache (list endpoints only)
CACHE_TTL_SECONDS = int(os.getenv("CACHE_TTL_SECONDS", "300"))
CACHE_MAX_SIZE = int(os.getenv("CACHE_MAX_SIZE", "500"))

# Pagination
DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
MAX_LIMIT = 100

# CORS (comma-separated list, "*" allows everything)
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "*").split(",")
    if origin.strip()
]

# Load the sample doctors/appointments on startup
SEED_DATA = _env_bool("SEED_DATA", True)

# Appointment defaults
DEFAULT_REASON = "General consultation"
NOT_SPECIFIED = "Not specified"
