"""Central application settings using Pydantic."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    # Core application
    log_level: str = Field("INFO", env="LOG_LEVEL")
    host: str = Field("0.0.0.0", env="HOST")
    port: int = Field(3000, env="PORT")

    # Google Custom Search
    google_api_key: str | None = Field(None, env="GOOGLE_API_KEY")
    google_cx: str | None = Field(None, env="GOOGLE_CX")
    search_timeout: float = Field(30.0, env="SEARCH_TIMEOUT")

    # Google Sheets (service-account JSON payload as a string)
    google_sheets_credentials: str | None = Field(
        None, env="GOOGLE_SHEETS_CREDENTIALS"
    )

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


def get_settings() -> Settings:
    """Return application settings loaded from environment variables."""
    return Settings()
