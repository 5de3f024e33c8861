"""Application configuration from environment variables."""
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """All config comes from env vars or .env file."""

    HOST: str = "0.0.0.0"
    PORT: int = 42060
    DATABASE_URL: str = "sqlite+aiosqlite:///./notes.db"
    FILE_STORAGE_PATH: str = "./uploads"
    MAX_UPLOAD_BYTES: int = 100 * 1024 * 1024
    CORS_ORIGINS: str = "*"
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()
