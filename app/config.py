from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import field_validator
from typing import List, Union

from dotenv import load_dotenv

load_dotenv()


class Settings(BaseSettings):
    # Database
    DATABASE_URL: str = "sqlite://./monuments.db"
    # Security
    JWT_SECRET: str = "dev-jwt-secret-change-me-very-long-32-chars-minimum"
    ACCESS_TOKEN_EXPIRES_MIN: int = 1440
    # App
    APP_ENV: str = "development"
    PORT: int = 5555
    CORS_ORIGINS: Union[str, List[str]] = "http://localhost:3000,http://127.0.0.1:3000,http://localhost:5173"

    # Storage
    STORAGE_DRIVER: str = "local"
    STORAGE_DIR: str = "./storage"
    AWS_ACCESS_KEY: str = ""
    AWS_SECRET_ACCESS_KEY: str = ""
    AWS_BUCKET_NAME: str = ""
    AWS_BUCKET_REGION: str = "us-east-1"

    # Signed media URLs
    PUBLIC_BASE_URL: str = "http://127.0.0.1:5555"
    MEDIA_SIGNING_KEY: str = "dev-media-signing-key-change-me-32-chars-min"
    SIGNED_URL_EXPIRES_S: int = 3600

    # Media
    IMAGE_QUALITY: int = 30
    MAX_UPLOAD_BYTES: int = 100 * 1024 * 1024

    RATE_LIMIT_ENABLED: bool = True

    # Monuments
    CASCADE_GALLERY_ON_MONUMENT_DELETE: bool = True

    # Observability
    SENTRY_DSN: str = ""

    @field_validator('CORS_ORIGINS', mode='before')
    @classmethod
    def parse_cors_origins(cls, v):
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(',') if origin.strip()]
        return v

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


settings = Settings()
