from __future__ import annotations

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Web server
    SERVICE_HOST: str = Field(default="0.0.0.0")
    SERVICE_PORT: int = Field(default=8080)

    # Remote endpoint (Apps Script web app deployment URL)
    API_URL: str = Field(
        default="http://localhost:8080/exec",
        description="Endpoint receiving action-tagged JSON POSTs"
    )

    # Page access
    CORS_ALLOW_ORIGINS: str = Field(default="*", description="Comma separated origins or *")

    LOG_LEVEL: str = Field(default="INFO", description="DEBUG, INFO, WARNING, ERROR or CRITICAL")

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    @field_validator("LOG_LEVEL")
    @classmethod
    def known_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"unknown log level: {v}")
        return level


settings = Settings()
