"""
Configuration management for the Yatra site API.
"""
from pydantic_settings import BaseSettings
from typing import Optional


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_name: str = "Yatra Site API"

    # Server Configuration
    host: str = "127.0.0.1"
    port: int = 8000
    debug: bool = False

    # Logging
    log_level: str = "INFO"
    log_file: Optional[str] = None

    # HTTP
    cors_origins: list[str] = ["*"]
    frontend_dir: Optional[str] = None  # Defaults to <repo>/frontend

    # Populate the catalog with sample data on startup
    seed_data: bool = True

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False


# Settings for the process entry point
settings = Settings()
