"""Main FastAPI application."""

from user_directory.config import get_settings
from user_directory.factory import configure_logging, create_app

# Initialize settings
settings = get_settings()
configure_logging(settings)

# Create FastAPI application
app = create_app(settings)


def run() -> None:
    """Serve the application with uvicorn."""
    import uvicorn

    uvicorn.run(
        app,
        host=settings.api_host,
        port=settings.api_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
