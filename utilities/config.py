"""
Settings for the shared utilities, read from environment variables.
Kept apart from the API settings so utilities do not depend on the API package.
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings

SUPPORTED_HASH_SCHEMES = ['pbkdf2_sha256', 'pbkdf2_sha512', 'sha256_crypt', 'sha512_crypt']


class UtilitiesConfig(BaseSettings):
    """Password hashing settings."""

    password_hash_scheme: str = "pbkdf2_sha256"

    model_config = {
        "env_file": ".env",
        "extra": "ignore"
    }

    @field_validator('password_hash_scheme')
    @classmethod
    def validate_hash_scheme(cls, v):
        """Only salted schemes that passlib computes without native backends."""
        if v.lower() not in SUPPORTED_HASH_SCHEMES:
            raise ValueError(f'password_hash_scheme must be one of: {SUPPORTED_HASH_SCHEMES}')
        return v.lower()


# Global configuration instance
config = UtilitiesConfig()
