"""
API configuration settings.
"""

from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings


class APIConfig(BaseSettings):
    """API configuration settings."""

    # API Settings
    api_title: str = "Library Books & Users API"
    api_version: str = "1.0.0"
    api_description: str = (
        "REST API for books and user accounts: paginated book listing and creation, "
        "user registration, login, update and deletion. Every failure is reported "
        "as {error, message, status_code}."
    )

    # Server Settings
    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = False

    # Database Settings
    mongodb_url: str = "mongodb://localhost:27017"
    mongodb_database: str = "library"
    users_collection: str = "users"
    books_collection: str = "books"
    mongodb_timeout_ms: int = 5000

    # Pagination
    default_page_limit: int = 10
    max_page_limit: int = 100

    # Credentials
    password_min_length: int = 8

    # CORS Settings
    cors_origins: list = ["*"]
    cors_allow_credentials: bool = True
    cors_allow_methods: list = ["*"]
    cors_allow_headers: list = ["*"]

    # Logging
    log_level: str = "INFO"
    log_format: str = "json"
    log_file: Optional[str] = None

    model_config = {
        "env_file": ".env",
        "extra": "ignore"  # Ignore extra fields from .env
    }

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v):
        """Ensure log level is valid."""
        valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
        if v.upper() not in valid_levels:
            raise ValueError(f'log_level must be one of: {valid_levels}')
        return v.upper()

    @field_validator('log_format')
    @classmethod
    def validate_log_format(cls, v):
        """Ensure log format is valid."""
        valid_formats = ['json', 'console']
        if v.lower() not in valid_formats:
            raise ValueError(f'log_format must be one of: {valid_formats}')
        return v.lower()

    @field_validator('default_page_limit', 'max_page_limit')
    @classmethod
    def validate_page_limit(cls, v):
        """Page limits must be positive."""
        if v < 1:
            raise ValueError('page limits must be at least 1')
        return v


# Global config instance
config = APIConfig()
