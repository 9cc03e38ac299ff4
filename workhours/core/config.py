"""Application configuration."""

from os import getenv

from pydantic import BaseModel


class Settings(BaseModel):
    """Runtime settings for the application."""

    app_name: str = getenv("APP_NAME", "Workhours Booker")
    database_url: str = getenv("DATABASE_URL", "sqlite:///./Workhours.sqlite")
    log_level: str = getenv("LOG_LEVEL", "INFO")
    currency_symbol: str = getenv("CURRENCY_SYMBOL", "€")


settings: Settings = Settings()
