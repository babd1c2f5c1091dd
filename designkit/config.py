"""designkit configuration."""

from typing import Literal

from pydantic_settings import BaseSettings

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """Settings loaded from environment variables."""

    # Logging
    log_level: LogLevel = "INFO"
    log_format: Literal["text", "json"] = "text"

    # Shared log sink (the singleton lesson)
    log_dir: str = "logs"
    log_file: str = "designkit.log"

    # Abstract factory lesson: which storefront kit to build
    storefront_region: str = "domestic"

    # Open/closed lesson
    seasonal_discount_rate: float = 0.10

    # Factory lesson
    default_notification: str = "email"

    class Config:
        env_prefix = "DESIGNKIT_"


settings = Settings()
