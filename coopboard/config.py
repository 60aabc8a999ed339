from pathlib import Path
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List

BASE_DIR = Path(__file__).resolve().parent.parent
ENV_FILE = BASE_DIR / ".env"


class Settings(BaseSettings):
    # Application
    PROJECT_NAME: str = "CoopBoard"
    VERSION: str = "1.0.0"
    API_V1_STR: str = "/api/v1"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Security
    SECRET_KEY: str = "change-me"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 10080  # 7 days

    # Database
    # Default to a local sqlite file for development; override via .env in production.
    DATABASE_URL: str = "sqlite:///./coopboard.db"
    # Session setting read by row-level security policies on PostgreSQL
    SESSION_CONTEXT_KEY: str = "app.current_family"

    # CORS
    BACKEND_CORS_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://localhost:5173",
    ]

    # Scheduling
    DEFAULT_CLEANING_TIME: str = "09:00"
    DEFAULT_CLEANING_CAPACITY: int = 2
    DEFAULT_TASK_CAPACITY: int = 1
    UPCOMING_PAGE_SIZE: int = 30
    MAX_PAGE_SIZE: int = 100
    CLEANING_AREAS: List[str] = [
        "Kitchen",
        "Bathrooms",
        "Classrooms",
        "Corridors",
        "Garden",
        "Canteen",
    ]

    model_config = SettingsConfigDict(
        env_file=str(ENV_FILE), case_sensitive=True, extra="ignore"
    )


settings = Settings()
