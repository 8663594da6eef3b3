"""
Tests for configuration settings.
"""

import pytest
from pydantic import ValidationError

from api.config import APIConfig
from utilities.config import UtilitiesConfig


class TestAPIConfig:
    """Test cases for APIConfig validators."""

    def test_defaults(self):
        config = APIConfig()
        assert config.default_page_limit == 10
        assert config.max_page_limit == 100
        assert config.password_min_length == 8

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError):
            APIConfig(log_level="verbose")

    def test_log_level_is_normalised(self):
        assert APIConfig(log_level="debug").log_level == "DEBUG"

    def test_invalid_log_format(self):
        with pytest.raises(ValidationError):
            APIConfig(log_format="xml")

    def test_log_format_is_normalised(self):
        assert APIConfig(log_format="CONSOLE").log_format == "console"

    @pytest.mark.parametrize("field", ["default_page_limit", "max_page_limit"])
    def test_page_limits_must_be_positive(self, field):
        with pytest.raises(ValidationError):
            APIConfig(**{field: 0})


class TestUtilitiesConfig:
    """Test cases for UtilitiesConfig validators."""

    def test_default_scheme(self):
        assert UtilitiesConfig().password_hash_scheme == "pbkdf2_sha256"

    def test_unsupported_scheme(self):
        with pytest.raises(ValidationError):
            UtilitiesConfig(password_hash_scheme="md5_crypt")
