"""Central application settings loaded from environment variables."""

from pydantic_settings import BaseSettings
from typing import List
from pathlib import Path


class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./yve_collective.db"
    SECRET_KEY: str = "change-me-to-a-random-secret-key"
    DEBUG: bool = True
    LOG_LEVEL: str = "INFO"
    ALLOWED_ORIGINS: List[str] = ["http://localhost:3000", "http://localhost:8000"]

    # Admin session (JWT)
    ADMIN_PASSWORD: str = ""
    ADMIN_NAME: str = "Admin"
    ADMIN_EMAIL: str = "admin@yvecollective.com"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 480

    # Blob storage
    BLOB_BACKEND: str = "local"  # local/vercel
    BLOB_READ_WRITE_TOKEN: str = ""
    BLOB_API_URL: str = "https://blob.vercel-storage.com"
    BLOB_API_VERSION: str = "7"
    BLOB_HOST_MARKER: str = "blob.vercel-storage.com"
    BLOB_TIMEOUT_SECONDS: float = 30.0
    BLOB_DELETE_WORKERS: int = 4

    # File upload
    MAX_UPLOAD_SIZE: int = 5 * 1024 * 1024  # 5 MB
    ALLOWED_IMAGE_EXTENSIONS: List[str] = ["jpg", "jpeg", "png", "gif", "webp", "avif"]
    UPLOAD_DIR: str = "uploads"

    # Listing
    PROPERTY_PAGE_SIZE: int = 12
    SIMILAR_PROPERTY_LIMIT: int = 3

    class Config:
        env_file = str(Path(__file__).resolve().parents[1] / ".env")


settings = Settings()
