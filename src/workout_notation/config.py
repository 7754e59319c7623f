"""Configuration settings for the workout notation parser."""
import os
from typing import List, Literal


EnvironmentType = Literal["development", "staging", "production"]


def _split_csv(value: str) -> List[str]:
    return [item.strip().lower() for item in value.split(",") if item.strip()]


class Settings:
    """Application settings."""

    # Environment
    ENVIRONMENT: EnvironmentType = "development"
    LOG_LEVEL: str = "INFO"

    # Notation grammar
    WORKOUT_NOTATION_LOCALES: List[str] = ["en", "ru"]

    # HTTP adapter
    CORS_ALLOWED_ORIGINS: List[str] = ["http://localhost:3000", "http://localhost:3001"]

    def __init__(self):
        # Environment
        env = os.getenv("ENVIRONMENT", "development").lower()
        if env in ("development", "staging", "production"):
            self.ENVIRONMENT = env  # type: ignore
        else:
            self.ENVIRONMENT = "development"

        level = os.getenv("LOG_LEVEL", "INFO").upper()
        if level in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            self.LOG_LEVEL = level
        else:
            self.LOG_LEVEL = "INFO"

        # Empty means "every locale the grammar knows about"
        self.WORKOUT_NOTATION_LOCALES = _split_csv(os.getenv("WORKOUT_NOTATION_LOCALES", "en,ru"))

        origins = os.getenv("CORS_ALLOWED_ORIGINS")
        if origins:
            self.CORS_ALLOWED_ORIGINS = [o.strip() for o in origins.split(",") if o.strip()]
        else:
            self.CORS_ALLOWED_ORIGINS = list(Settings.CORS_ALLOWED_ORIGINS)


settings = Settings()
