"""User Directory: read-only FastAPI user directory service."""

__version__ = "0.1.0"
