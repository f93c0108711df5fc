"""Application settings and configuration management."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Token signing
    jwt_secret: str = Field(
        default="",
        description="Secret used to sign and verify issued bearer tokens",
    )
    jwt_algorithm: str = Field(
        default="HS256",
        description="Signing algorithm for issued tokens",
    )
    token_lifetime_seconds: int = Field(
        default=4 * 60 * 60,
        description="Lifetime of issued tokens in seconds",
    )

    # Password hashing (argon2id)
    password_hash_time_cost: int = Field(
        default=3,
        description="Argon2 time cost (iterations)",
    )
    password_hash_memory_cost: int = Field(
        default=65536,
        description="Argon2 memory cost in KiB",
    )
    password_hash_parallelism: int = Field(
        default=4,
        description="Argon2 parallelism",
    )

    # Database Configuration
    database_url: str = Field(
        default="sqlite+aiosqlite:///./auth_gateway.db",
        description="Database connection URL",
    )
    database_pool_size: int = Field(
        default=5,
        description="Connection pool size (ignored for SQLite)",
    )
    database_pool_max_overflow: int = Field(
        default=10,
        description="Connection pool overflow (ignored for SQLite)",
    )

    # Frontend that receives relayed provider tokens
    frontend_url: str = Field(
        default="http://localhost:5173",
        description="Base URL of the frontend receiving OAuth redirects",
    )
    cookie_secure: bool = Field(
        default=False,
        description="Mark the relayed access_token cookie as Secure",
    )

    # GitHub OAuth
    github_client_id: str = Field(
        default="",
        description="GitHub OAuth app client ID",
    )
    github_client_secret: str = Field(
        default="",
        description="GitHub OAuth app client secret",
    )
    github_authorize_url: str = Field(
        default="https://github.com/login/oauth/authorize",
        description="GitHub authorization endpoint",
    )
    github_token_url: str = Field(
        default="https://github.com/login/oauth/access_token",
        description="GitHub token endpoint",
    )
    github_scope: str = Field(
        default="user",
        description="Scopes requested from GitHub",
    )

    # Google OAuth
    google_client_id: str = Field(
        default="",
        description="Google OAuth client ID",
    )
    google_client_secret: str = Field(
        default="",
        description="Google OAuth client secret",
    )
    google_redirect_uri: str = Field(
        default="http://localhost:3000/auth/google/callback",
        description="Redirect URI registered with Google",
    )
    google_authorize_url: str = Field(
        default="https://accounts.google.com/o/oauth2/v2/auth",
        description="Google authorization endpoint",
    )
    google_token_url: str = Field(
        default="https://oauth2.googleapis.com/token",
        description="Google token endpoint",
    )
    google_scope: str = Field(
        default="profile email",
        description="Scopes requested from Google",
    )

    oauth_http_timeout: float = Field(
        default=10.0,
        description="Timeout in seconds for provider token requests",
    )

    # Server
    cors_origins: list[str] = Field(
        default_factory=lambda: ["*"],
        description="Allowed CORS origins",
    )
    host: str = Field(
        default="0.0.0.0",
        description="Server host",
    )
    port: int = Field(
        default=3000,
        description="Server port",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )
    log_format: Literal["json", "text"] = Field(
        default="json",
        description="Log format",
    )

    # Development Settings
    debug: bool = Field(
        default=False,
        description="Enable debug mode",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
