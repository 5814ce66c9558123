"""
Configuration management for the recipe catalog admin.

This module centralizes environment variable loading from the .env file at
the project root. It is imported early by the Streamlit entry point so the
.env file is loaded before any other code reads the environment.

On a hosted deployment .env usually does not exist; load_dotenv() is then a
no-op and the platform's environment variables are used instead.

Environment Variables:
- SUPABASE_URL: Required, Record Store endpoint
- SUPABASE_ANON_KEY: Required, Record Store API key (SUPABASE_KEY accepted as fallback)
- RECIPES_TABLE: Optional, defaults to "recipes"
- RECIPE_IMAGES_BUCKET: Optional, defaults to "recipe-images"
- RECIPE_IMAGES_PREFIX: Optional, defaults to "recipes"
- LOG_LEVEL: Optional, explicit logging level
- ENVIRONMENT: Optional, "development" (default), "staging" or "production"
"""

import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Logger hierarchy configured by setup_logging()
ROOT_LOGGER_NAME = "recipe_catalog"


def load_env_file() -> None:
    """
    Load environment variables from .env file at project root.

    Safe to call multiple times. Existing environment variables take
    precedence over values in the file.
    """
    # recipe_catalog/config.py -> recipe_catalog/ -> project root
    project_root = Path(__file__).resolve().parent.parent
    load_dotenv(project_root / ".env", override=False)


# Load .env file on module import
load_env_file()


class SupabaseConfig:
    """Configuration for the Record Store (Supabase table + storage bucket)."""

    @staticmethod
    def get_url() -> Optional[str]:
        """
        Get the Supabase project URL.

        Returns:
            URL string or None if not set
        """
        return os.getenv("SUPABASE_URL")

    @staticmethod
    def get_key() -> Optional[str]:
        """
        Get the Supabase API key.

        Returns:
            SUPABASE_ANON_KEY, else SUPABASE_KEY, else None
        """
        return os.getenv("SUPABASE_ANON_KEY") or os.getenv("SUPABASE_KEY")

    @staticmethod
    def get_table() -> str:
        """Name of the recipes relation (default: "recipes")."""
        return os.getenv("RECIPES_TABLE", "recipes")

    @staticmethod
    def get_bucket() -> str:
        """Name of the image bucket (default: "recipe-images")."""
        return os.getenv("RECIPE_IMAGES_BUCKET", "recipe-images")

    @staticmethod
    def get_image_prefix() -> str:
        """Object path prefix for uploaded images (default: "recipes")."""
        return os.getenv("RECIPE_IMAGES_PREFIX", "recipes").strip("/")


def get_required_env_vars() -> dict:
    """
    Get a dictionary of all required environment variables and their status.

    Returns:
        Dictionary with keys:
        - supabase_url: bool (True if set)
        - supabase_key: bool (True if set)
    """
    return {
        "supabase_url": SupabaseConfig.get_url() is not None,
        "supabase_key": SupabaseConfig.get_key() is not None,
    }


def validate_required_config() -> None:
    """
    Validate that all required environment variables are set.

    Raises:
        RuntimeError: If any required configuration is missing
    """
    missing = []

    if not SupabaseConfig.get_url():
        missing.append("SUPABASE_URL (Record Store endpoint)")

    if not SupabaseConfig.get_key():
        missing.append("SUPABASE_ANON_KEY (Record Store API key)")

    if missing:
        raise RuntimeError(
            "Missing required environment variables:\n" +
            "\n".join(f"  - {var}" for var in missing) +
            "\n\nPlease create a .env file at the project root with these variables."
        )


def get_log_level() -> str:
    """
    Get log level from environment variable with environment-based defaults.

    Priority:
    1. LOG_LEVEL environment variable (if explicitly set)
    2. ENVIRONMENT-based default
    3. INFO
    """
    log_level = os.getenv("LOG_LEVEL", "").strip().upper()
    if log_level:
        return log_level

    environment = os.getenv("ENVIRONMENT", "development").lower()
    environment_defaults = {
        "production": "INFO",
        "development": "DEBUG",
        "staging": "WARNING",
    }
    return environment_defaults.get(environment, "INFO")


def setup_logging(log_level: Optional[str] = None) -> logging.Logger:
    """
    Configure console logging for the recipe_catalog logger hierarchy.

    Args:
        log_level: Logging level name; defaults to get_log_level()

    Returns:
        The configured package logger
    """
    level_name = (log_level or get_log_level()).upper()
    level = getattr(logging, level_name, logging.INFO)

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level)

    # Clear existing handlers to avoid duplicates on Streamlit reruns
    logger.handlers.clear()

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT, LOG_DATE_FORMAT))
    logger.addHandler(console_handler)

    logger.debug("Logging configured (level=%s)", level_name)
    return logger
