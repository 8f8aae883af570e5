"""Pytest configuration and fixtures."""

import os
import sys
from collections.abc import Iterator

import pytest

# Ensure 'src' is on sys.path for absolute 'user_directory.*' imports
_TESTS_DIR = os.path.dirname(__file__)
_SRC_PATH = os.path.abspath(os.path.join(_TESTS_DIR, "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from fastapi.testclient import TestClient  # noqa: E402

from user_directory.config import Settings  # noqa: E402
from user_directory.factory import create_app  # noqa: E402
from user_directory.services.seed_data import build_user_store  # noqa: E402
from user_directory.services.user_store import InMemoryUserStore  # noqa: E402


@pytest.fixture
def settings() -> Settings:
    """Settings isolated from any local .env file."""
    return Settings(_env_file=None, environment="development", user_seed="extended", not_found_status_code=200)


@pytest.fixture
def store() -> InMemoryUserStore:
    """Fresh store holding the extended seed."""
    return build_user_store("extended")


@pytest.fixture
def client(settings: Settings, store: InMemoryUserStore) -> Iterator[TestClient]:
    """Create a FastAPI test client over an injected store."""
    with TestClient(create_app(settings, store)) as test_client:
        yield test_client
