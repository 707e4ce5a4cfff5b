"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "rental-store"
    log_level: str = "INFO"

    # Statements
    default_statement_format: str = "plain"
    currency_symbol: str = "$"
    currency_places: int = 2


settings = Settings()
