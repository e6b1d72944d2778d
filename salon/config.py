# salon/config.py

import logging
from functools import lru_cache
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """
    Process configuration read from the environment (or a local .env file).

    Salon-level settings such as business hours and slot sizes are stored in
    the database instead, since the admin edits them at runtime.
    """

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    database_url: str = "sqlite:///./salon.db"
    sql_echo: bool = False

    secret_key: str = "change-me-later"
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 30

    # Only used the first time the settings row is seeded
    default_admin_pin: str = Field(default="1234", min_length=4)

    log_level: str = "INFO"
    strict_status_transitions: bool = True
    cors_origins: List[str] = [
        "http://localhost:8080",
        "http://localhost:5173",
        "http://localhost:3000",
    ]


@lru_cache
def get_settings() -> Settings:
    settings = Settings()
    if settings.secret_key == "change-me-later":
        logger.warning("SECRET_KEY is not set; using the development default")
    return settings
