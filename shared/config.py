"""
Centralized configuration for the RecycleMe backend.

All settings are loaded from environment variables with sensible defaults.
Variables are prefixed with RECYCLEME_ (e.g., RECYCLEME_JWT_SECRET).
"""

from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="RECYCLEME_",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "RecycleMe API"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 3000
    reload: bool = False

    # CORS settings
    cors_origins: list[str] = ["http://localhost:5173", "http://localhost:3000"]
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = ["*"]
    cors_allow_headers: list[str] = ["*"]

    # Supabase
    supabase_url: str = ""
    supabase_service_role_key: str = ""
    # Direct Postgres connection, only used by run_migrations.py
    supabase_db_url: str = ""

    # Session tokens
    jwt_secret: str = ""
    jwt_algorithm: str = "HS256"
    jwt_expiry_hours: int = 12

    # Password hashing
    bcrypt_rounds: int = 10

    # Rewards
    points_per_kg: int = 100
    coupon_max_attempts: int = 3


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    Call get_settings.cache_clear() after changing the environment.
    """
    return Settings()
