"""Application settings."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from car_catalog.application.dtos.car import DESCRIPTION_MAX_LENGTH


class Settings(BaseSettings):
    """Application configuration settings."""

    debug_mode: bool = False  # True -> DEBUG logging, including popup dismissals
    log_level: str = "INFO"
    filter_multi_select: bool = True  # False -> one value per filter section
    description_max_length: int = Field(
        default=DESCRIPTION_MAX_LENGTH, ge=1, le=DESCRIPTION_MAX_LENGTH
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        env_prefix="CAR_CATALOG_",
        extra="ignore",
    )

    @property
    def effective_log_level(self) -> str:
        """Get the level the package logger runs at."""
        return "DEBUG" if self.debug_mode else self.log_level.upper()


settings = Settings()
