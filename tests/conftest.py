"""
Shared pytest fixtures for user service tests.
"""
import os
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from app.application.validation import UserValidator
from tests.fakes import InMemoryUserRepository


@pytest.fixture
def mock_env():
    """Fixture to set common test environment variables."""
    env_vars = {
        "APP_ENV": "test",
        "MONGO_URI": "mongodb://localhost:27017",
        "LOG_LEVEL": "DEBUG",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def mock_settings():
    """Fixture to mock get_settings for tests. Patches all modules that use it."""
    mock = MagicMock()
    mock.mongo_uri = "mongodb://localhost:27017"
    mock.mongo_database_name = "users-test"
    mock.mongo_users_collection = "usermodel"
    mock.mongo_ensure_indexes = True
    mock.log_level = "INFO"
    mock.cors_allow_origins = ["*"]

    # Patch at source and at use sites (modules import get_settings at load time)
    with patch("app.core.config.get_settings", return_value=mock), patch(
        "app.main.get_settings", return_value=mock
    ), patch("app.infrastructure.db.mongo_connection.get_settings", return_value=mock):
        yield mock


@pytest.fixture
def validator():
    return UserValidator()


@pytest.fixture
def memory_repo():
    """Empty in-memory user repository."""
    return InMemoryUserRepository()


@pytest.fixture
def mock_user_repo():
    """Mock UserRepository with async methods."""
    return AsyncMock()
