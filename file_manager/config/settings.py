"""
Configuration settings for the application.
"""

import logging
import os

from dotenv import load_dotenv

from file_manager.exceptions import ConfigurationError

# Load environment variables from .env file
_ = load_dotenv()


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self):
        self.chunk_size: int = self._get_int_env("FILE_MANAGER_CHUNK_SIZE", 64 * 1024)
        self.brotli_quality: int = self._get_int_env("FILE_MANAGER_BROTLI_QUALITY", 11)
        self.log_level: str = self._get_env("FILE_MANAGER_LOG_LEVEL", "WARNING").upper()
        self.log_file: str | None = os.getenv("FILE_MANAGER_LOG_FILE") or None
        self.log_stderr: bool = self._get_bool_env("FILE_MANAGER_LOG_STDERR", False)
        self.prompt: str = self._get_env("FILE_MANAGER_PROMPT", ">")

        if self.chunk_size <= 0:
            raise ConfigurationError("FILE_MANAGER_CHUNK_SIZE must be a positive integer")
        if not 0 <= self.brotli_quality <= 11:
            raise ConfigurationError("FILE_MANAGER_BROTLI_QUALITY must be between 0 and 11")
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ConfigurationError(f"Unknown log level: {self.log_level}")

    def _get_env(self, key: str, default: str) -> str:
        """Get an environment variable with a default value."""
        return os.getenv(key, default)

    def _get_bool_env(self, key: str, default: bool) -> bool:
        """Get a boolean environment variable (1/true/yes)."""
        value = os.getenv(key)
        if value is None or not value.strip():
            return default
        return value.strip().lower() in ("1", "true", "yes")

    def _get_int_env(self, key: str, default: int) -> int:
        """Get an integer environment variable, raise error if it does not parse."""
        value = os.getenv(key)
        if value is None or not value.strip():
            return default
        try:
            return int(value)
        except ValueError:
            raise ConfigurationError(f"Environment variable {key} must be an integer, got {value!r}")


# Global settings instance
settings = Settings()
