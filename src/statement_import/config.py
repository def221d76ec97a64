from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    csv_default_delimiter: str = Field(default=";", alias="CSV_DEFAULT_DELIMITER")

    def validate_required(self) -> None:
        if len(self.csv_default_delimiter) != 1:
            raise ValueError("CSV_DEFAULT_DELIMITER must be a single character")


@lru_cache
def load_settings() -> Settings:
    settings = Settings()
    settings.validate_required()
    return settings
