# Standard library imports
import os
from typing import Final, List, Optional


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


class Settings:
    """
    Application settings loaded from environment variables.

    This class centralizes all configuration settings for the application.
    All settings are loaded from environment variables with sensible defaults.
    """

    def __init__(self) -> None:
        self.app_env: Final[str] = os.getenv("APP_ENV", "development")

        # Database Configuration
        self.mongo_uri: Final[str] = os.getenv("MONGO_URI", "mongodb://localhost:27017")
        default_database = "users-test" if self.app_env == "test" else "users"
        self.mongo_database_name: Final[str] = os.getenv("MONGO_DB_NAME", default_database)
        self.mongo_users_collection: Final[str] = os.getenv("MONGO_USERS_COLLECTION", "usermodel")
        self.mongo_ensure_indexes: Final[bool] = _parse_bool(
            os.getenv("MONGO_ENSURE_INDEXES", "true")
        )

        # Logging
        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO")

        # CORS
        self.cors_allow_origins: Final[List[str]] = [
            origin.strip()
            for origin in os.getenv("CORS_ALLOW_ORIGINS", "*").split(",")
            if origin.strip()
        ]


# Global settings instance (singleton pattern)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get application settings (singleton pattern)

    Returns:
        Settings instance with all configuration values
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
