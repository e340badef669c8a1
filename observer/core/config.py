from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

from observer.core.version import __version__


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="allow",
    )

    APP_NAME: str = "Discovery Observer"
    APP_ENV: Literal["development", "production"] = "production"
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    # Any loguru level name: TRACE, DEBUG, INFO, WARNING, ERROR
    LOG_LEVEL: str = "INFO"


settings = Settings()

APP_VERSION = __version__
