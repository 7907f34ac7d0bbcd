"""
Application settings for the Attendance Portal client.

Values are read from the environment (or a local .env file) so the same
client can point at development, staging or production backends.
"""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Client settings.

    All settings can be overridden via environment variables or a .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    APP_NAME: str = "attendance-portal"
    APP_VERSION: str = "1.0.0"

    # Backend
    API_BASE_URL: str = "http://localhost:5000"
    REQUEST_TIMEOUT: float = 30.0

    # Session persistence
    SESSION_STORAGE_PATH: Path = Path.home() / ".attendance-portal" / "storage.json"
    SESSION_STORAGE_KEY: str = "auth-storage"

    # Listing defaults
    DEFAULT_PAGE_LIMIT: int = 10

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


settings = Settings()
