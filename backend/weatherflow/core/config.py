from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    # Open-Meteo endpoints (public, keyless)
    GEOCODING_URL: str = "https://geocoding-api.open-meteo.com/v1/search"
    FORECAST_URL: str = "https://api.open-meteo.com/v1/forecast"

    # Per-stage timeouts in seconds
    GEOCODING_TIMEOUT: float = 5.0
    FORECAST_TIMEOUT: float = 10.0

    # Most recently used sessions kept in memory
    MAX_SESSIONS: int = 1000

    LOGGER: int = 20
    LOG_DIRECTORY: str = "logs"
    LOG_FILE: str = "app.log"
    LOG_TO_FILE: bool = True

    model_config = SettingsConfigDict(
        # Look for .env in the current folder OR the parent folder
        env_file=(".env", "../.env"), 
        env_file_encoding="utf-8",
        extra="ignore"
    )

settings = Settings()
