# ============================================================================
# FILE: songbook/config.py
# ============================================================================
from pydantic_settings import BaseSettings
from sqlalchemy.engine import URL
from typing import List, Optional

class Settings(BaseSettings):
    """Application configuration using Pydantic BaseSettings"""

    # App settings
    APP_NAME: str = "Songbook"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    HOST: str = "0.0.0.0"
    PORT: int = 3000

    # Database (DATABASE_URL wins over the DB_* parts)
    DATABASE_URL: Optional[str] = None
    DB_USER: str = "postgres"
    DB_PASSWORD: str = ""
    DB_HOST: str = ""
    DB_PORT: int = 5432
    DB_NAME: str = ""

    # File store
    UPLOAD_DIR: str = "uploads"
    UPLOAD_URL_PREFIX: str = "/uploads"
    MAX_FILE_SIZE: int = 5 * 1024 * 1024
    MAX_FILES_PER_UPLOAD: int = 100
    ALLOWED_AUDIO_TYPES: str = r"audio/(mpeg|wav|flac|mp3)"

    # Redis cache (empty URL disables caching)
    REDIS_URL: str = "redis://localhost:6379/0"
    CACHE_EXPIRE_SECONDS: int = 3600

    # CORS
    CORS_ORIGINS: List[str] = ["*"]

    class Config:
        env_file = ".env"
        case_sensitive = True

    @property
    def database_url(self) -> str:
        """Resolve the SQLAlchemy URL to connect with"""
        if self.DATABASE_URL:
            return self.DATABASE_URL
        if self.DB_HOST and self.DB_NAME:
            return URL.create(
                "postgresql+psycopg2",
                username=self.DB_USER,
                password=self.DB_PASSWORD or None,
                host=self.DB_HOST,
                port=self.DB_PORT,
                database=self.DB_NAME,
            ).render_as_string(hide_password=False)
        return "sqlite:///./songbook.db"

    @property
    def max_file_size_mb(self) -> int:
        return max(1, self.MAX_FILE_SIZE // (1024 * 1024))

settings = Settings()
