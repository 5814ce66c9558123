"""
Tests for environment configuration and logging setup.
"""

import logging

import pytest

from recipe_catalog.config import (
    LOG_FORMAT,
    ROOT_LOGGER_NAME,
    SupabaseConfig,
    get_log_level,
    get_required_env_vars,
    setup_logging,
    validate_required_config,
)


@pytest.fixture
def clean_env(monkeypatch):
    """Remove every variable read by recipe_catalog.config."""
    for name in (
        "SUPABASE_URL", "SUPABASE_ANON_KEY", "SUPABASE_KEY",
        "RECIPES_TABLE", "RECIPE_IMAGES_BUCKET", "RECIPE_IMAGES_PREFIX",
        "LOG_LEVEL", "ENVIRONMENT",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestSupabaseConfig:
    """Test SupabaseConfig getters."""

    def test_defaults(self, clean_env):
        assert SupabaseConfig.get_url() is None
        assert SupabaseConfig.get_key() is None
        assert SupabaseConfig.get_table() == "recipes"
        assert SupabaseConfig.get_bucket() == "recipe-images"
        assert SupabaseConfig.get_image_prefix() == "recipes"

    def test_anon_key_preferred(self, clean_env):
        clean_env.setenv("SUPABASE_ANON_KEY", "anon")
        clean_env.setenv("SUPABASE_KEY", "legacy")
        assert SupabaseConfig.get_key() == "anon"

    def test_key_fallback(self, clean_env):
        clean_env.setenv("SUPABASE_KEY", "legacy")
        assert SupabaseConfig.get_key() == "legacy"

    def test_prefix_slashes_stripped(self, clean_env):
        clean_env.setenv("RECIPE_IMAGES_PREFIX", "/plats/")
        assert SupabaseConfig.get_image_prefix() == "plats"


class TestValidateRequiredConfig:
    """Test validate_required_config()."""

    def test_all_missing(self, clean_env):
        with pytest.raises(RuntimeError) as exc_info:
            validate_required_config()

        message = str(exc_info.value)
        assert "SUPABASE_URL" in message
        assert "SUPABASE_ANON_KEY" in message

    def test_only_key_missing(self, clean_env):
        clean_env.setenv("SUPABASE_URL", "https://demo.supabase.co")

        with pytest.raises(RuntimeError) as exc_info:
            validate_required_config()
        assert "SUPABASE_URL" not in str(exc_info.value)

    def test_complete(self, clean_env):
        clean_env.setenv("SUPABASE_URL", "https://demo.supabase.co")
        clean_env.setenv("SUPABASE_ANON_KEY", "anon")

        validate_required_config()
        assert get_required_env_vars() == {"supabase_url": True, "supabase_key": True}


class TestLogging:
    """Test log level resolution and handler setup."""

    def test_explicit_level_wins(self, clean_env):
        clean_env.setenv("LOG_LEVEL", "error")
        clean_env.setenv("ENVIRONMENT", "development")
        assert get_log_level() == "ERROR"

    @pytest.mark.parametrize("environment,expected", [
        ("development", "DEBUG"),
        ("production", "INFO"),
        ("staging", "WARNING"),
        ("unknown", "INFO"),
    ])
    def test_environment_defaults(self, clean_env, environment, expected):
        clean_env.setenv("ENVIRONMENT", environment)
        assert get_log_level() == expected

    def test_default_is_development(self, clean_env):
        assert get_log_level() == "DEBUG"

    def test_setup_logging_is_idempotent(self, clean_env):
        logger = setup_logging("WARNING")
        setup_logging("WARNING")

        assert logger.name == ROOT_LOGGER_NAME
        assert logger.level == logging.WARNING
        assert len(logger.handlers) == 1
        assert logger.handlers[0].formatter._fmt == LOG_FORMAT

    def test_unknown_level_falls_back_to_info(self, clean_env):
        logger = setup_logging("chatty")
        assert logger.level == logging.INFO
