"""Configuration management for the task board."""

from pathlib import Path

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Server (local presentation surface only)
    host: str = "127.0.0.1"
    port: int = 8000

    # Persistence: JSON file holding one entry per quadrant key
    storage_path: Path = Path.home() / ".taskmatrix" / "tasks.json"

    # Logging
    log_level: str = "info"

    class Config:
        env_prefix = "TASKMATRIX_"
        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()
