# statement_recon/config.py

from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # App
    app_name: str = "Statement Recon API"
    app_env: str = "development"
    debug: bool = True
    frontend_url: str = "http://localhost:3000"
    log_level: str = "INFO"

    # CSV input / output
    csv_delimiter: str = ","
    max_upload_bytes: int = 10 * 1024 * 1024  # 10 MB per file
    upload_encoding: str = "utf-8"
    export_encoding: str = "utf-8"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        env_prefix = "RECON_"


@lru_cache()
def get_settings() -> Settings:
    """Cached settings instance."""
    return Settings()
