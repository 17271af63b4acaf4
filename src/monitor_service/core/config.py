from functools import lru_cache

from pydantic import ValidationInfo, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # App
    app_name: str = "Monitor Management Service"
    app_env: str = "development"  # development, testing, production
    debug: bool = False
    enable_openapi: bool = True

    # Database
    database_url: str
    database_pool_size: int = 5
    database_max_overflow: int = 10
    database_schema: str = "hawkeye"
    run_migrations_on_startup: bool = False

    # Auth (mutating endpoints only)
    jwt_secret_key: str
    jwt_algorithm: str = "HS256"
    access_token_expire_minutes: int = 30

    # Pagination
    default_page_size: int = 100
    max_page_size: int = 1000

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Metrics
    metrics_api_key: str | None = None  # If set, /metrics requires this key

    @field_validator("jwt_secret_key")
    @classmethod
    def validate_jwt_secret(cls, v: str) -> str:
        if v == "change-this-to-a-secure-random-string":
            raise ValueError(
                "JWT_SECRET_KEY must be changed from default value. "
                "Generate a secure secret with: openssl rand -hex 32"
            )
        if len(v) < 32:
            raise ValueError("JWT_SECRET_KEY must be at least 32 characters")
        return v

    @field_validator("max_page_size")
    @classmethod
    def validate_max_page_size(cls, v: int, info: ValidationInfo) -> int:
        default = info.data.get("default_page_size", 100)
        if v < default:
            raise ValueError(
                f"MAX_PAGE_SIZE ({v}) must not be smaller than DEFAULT_PAGE_SIZE ({default})"
            )
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()
