"""Application configuration management."""

from typing import Literal

from pydantic import ConfigDict, Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_env: Literal["development", "production", "test"] = "development"

    # Database
    database_url: str = "sqlite+aiosqlite:///./jobboard.db"

    # Recruiter tokens
    jwt_secret: str
    jwt_expire_days: int = Field(default=30, ge=1)
    password_hash_rounds: int = Field(
        default=29000,
        ge=1000,
        description="pbkdf2_sha256 rounds for company passwords",
    )

    # Identity provider (job seekers)
    identity_api_base: str = "https://api.clerk.com"
    identity_secret_key: str | None = None
    identity_webhook_secret: str | None = None

    # CORS
    frontend_url: str = "http://localhost:3000"

    # Blob storage (S3-compatible)
    s3_endpoint: str | None = None
    s3_bucket: str = "job-portal"
    s3_region: str | None = None
    s3_access_key: str | None = None
    s3_secret_key: str | None = None
    s3_public_base_url: str | None = Field(
        default=None,
        description="Public URL prefix for stored objects; defaults to endpoint/bucket",
    )

    # Uploads
    max_logo_bytes: int = 5 * 1024 * 1024
    max_resume_bytes: int = 10 * 1024 * 1024

    model_config = ConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @property
    def is_production(self) -> bool:
        return self.app_env == "production"


settings = Settings()
