"""Application configuration via pydantic-settings.

Loads all settings from environment variables with sensible defaults.
A global `settings` singleton is available for import throughout the app.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Weather (Open-Meteo)
    WEATHER_API_URL: str = "https://api.open-meteo.com/v1/forecast"
    WEATHER_TIMEOUT_SECONDS: float = 10.0
    WEATHER_POLL_INTERVAL_MINUTES: int = 30
    WEATHER_HOT_THRESHOLD: float = 25.0

    # Location fallback (Gangnam station)
    DEFAULT_LATITUDE: float = 37.5172
    DEFAULT_LONGITUDE: float = 127.0473

    # Matching
    DEFAULT_MAX_GROUP_SIZE: int = 3
    MATCH_DELAY_MIN_SECONDS: float = 1.0
    MATCH_DELAY_MAX_SECONDS: float = 3.0

    # Group chat
    CHAT_REPLY_DELAY_MIN_SECONDS: float = 1.0
    CHAT_REPLY_DELAY_MAX_SECONDS: float = 3.0

    # CORS
    ALLOWED_ORIGINS: str = "*"

    # Logging
    LOG_LEVEL: str = "INFO"


settings = Settings()
