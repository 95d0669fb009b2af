"""
Configuration management using Pydantic Settings
"""
from pydantic_settings import BaseSettings
from typing import List


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # Database
    DATABASE_URL: str = "sqlite:///./courseware.db"

    # Content catalog
    CONTENT_PATH: str = "./chapters"
    SYNC_CATALOG_ON_STARTUP: bool = True
    SEED_BADGES_ON_STARTUP: bool = True

    # Application
    APP_NAME: str = "Courseware Learning Platform"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    ALLOWED_ORIGINS: List[str] = ["http://localhost:3000", "http://localhost:8000"]

    # Achievements & ranking
    LEADERBOARD_LIMIT: int = 10
    EXERCISE_MIN_CODE_LENGTH: int = 50  # strictly greater than this passes

    # Logging
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        case_sensitive = True


# Global settings instance
settings = Settings()
