"""
Application configuration using Pydantic settings.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    # App
    app_name: str = "Luca"
    log_level: str = "INFO"

    # Database
    database_url: str = "sqlite:///./data/db.sqlite"
    database_timeout_seconds: float = 10.0

    # Persistence
    remote_persistence_enabled: bool = True
    persist_batch_size: int = 500  # Max rows per write
    load_limit: int = 5000
    local_store_path: str = "./data/local_transactions.json"

    # Auth is handled upstream; requests without a user header fall back to this
    default_user_id: str = "local"

    # Server
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    frontend_url: str = "http://localhost:5173"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False
    )


# Global settings instance
settings = Settings()
