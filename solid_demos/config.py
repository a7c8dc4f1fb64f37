"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "solid-demos"
    log_level: str = "INFO"

    # User service (network-backed LSP implementation)
    user_service_base_url: str = "https://api.example.com"
    http_timeout_seconds: float = 5.0


settings = Settings()
