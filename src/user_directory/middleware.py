"""Middleware setup for the FastAPI application."""

import logging
import re

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

logger = logging.getLogger(__name__)

DEV_ENVIRONMENTS = {"development", "dev", "local"}

# Any port on the loopback host, for UIs served by local dev servers
DEV_ORIGIN_REGEX = r"https?://(localhost|127\.0\.0\.1)(:\d+)?"

_ORIGIN_PATTERN = re.compile(r"https?://[^/\s]+")


def get_allowed_origins(cors_origins: str | None = None) -> list[str]:
    """Parse the configured CORS origins.

    Args:
        cors_origins: Comma-separated origins, e.g. "https://ui.example.com,http://intranet:8080"

    Returns:
        Normalized, deduplicated origins. Entries that are not http(s) origins are skipped.
    """
    allowed_origins: list[str] = []

    for entry in (cors_origins or "").split(","):
        origin = entry.strip().rstrip("/")
        if not origin:
            continue
        if not _ORIGIN_PATTERN.fullmatch(origin):
            logger.warning("Ignoring invalid CORS origin: %r", entry)
            continue
        allowed_origins.append(origin)

    # Deduplicate while preserving order
    return list(dict.fromkeys(allowed_origins))


def get_origin_regex(environment: str = "development") -> str | None:
    """Origin regex accepted on top of the explicit list, if any."""
    return DEV_ORIGIN_REGEX if environment.lower() in DEV_ENVIRONMENTS else None


def is_origin_allowed(origin: str, cors_origins: str | None = None, environment: str = "development") -> bool:
    if origin in get_allowed_origins(cors_origins):
        return True
    origin_regex = get_origin_regex(environment)
    return origin_regex is not None and re.fullmatch(origin_regex, origin) is not None


def get_cors_headers(origin: str | None, cors_origins: str | None = None, environment: str = "development") -> dict[str, str]:
    """Get CORS headers for a given origin.

    Args:
        origin: The origin from the request header
        cors_origins: Comma-separated configured origins
        environment: Environment name (development, production, etc.)

    Returns:
        Dictionary of CORS headers, empty if origin is not allowed
    """
    if not origin or not is_origin_allowed(origin, cors_origins, environment):
        return {}

    return {
        "Access-Control-Allow-Origin": origin,
        "Access-Control-Allow-Methods": "GET",
        "Access-Control-Allow-Headers": "*",
    }


def setup_middleware(app: FastAPI, cors_origins: str | None = None, environment: str = "development") -> None:
    """Setup middleware for the FastAPI application.

    Args:
        app: FastAPI application instance
        cors_origins: Comma-separated origins allowed to read the directory
        environment: Environment name (development, production, etc.)
    """
    allowed_origins = get_allowed_origins(cors_origins)
    origin_regex = get_origin_regex(environment)

    # Read-only directory: GET only
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins,
        allow_origin_regex=origin_regex,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    logger.info(
        "CORS enabled for origins: %s, regex: %s (environment=%s)", allowed_origins, origin_regex, environment
    )
