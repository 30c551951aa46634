from pydantic_settings import BaseSettings
from functools import lru_cache
from typing import List, Optional


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    app_name: str = "Resume Parser Server"
    log_level: str = "INFO"
    cors_origins: List[str] = ["*"]

    # Upload Settings
    max_upload_size_mb: int = 5
    allowed_extensions: List[str] = [".pdf", ".docx", ".doc", ".txt"]

    # Parser Settings
    clean_extracted_text: bool = True
    # Year "Present" resolves to; unset means the current calendar year
    reference_year: Optional[int] = None

    class Config:
        env_file = ".env"
        extra = "ignore"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
