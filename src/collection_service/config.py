"""Application configuration from environment variables."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Supabase
    supabase_url: str = Field(
        default="http://localhost:54321",
        description="Supabase project URL",
    )
    supabase_anon_key: str = Field(default="", description="Supabase anon (public) key")
    accounts_table: str = Field(
        default="students",
        description="Relation joined as the collection owner",
    )
    owner_fk_name: str = Field(
        default="collections_owner_id_fkey",
        description="Foreign key used to resolve the owner join",
    )
    http_timeout: float = Field(default=10.0, description="Upstream HTTP timeout in seconds")

    # Auth
    auth_enabled: bool = Field(default=True, description="Require a verified bearer token")
    api_key: str = Field(default="", description="Service-to-service API key (empty disables)")

    # Rate limiting
    rate_limit_enabled: bool = Field(default=True, description="Enable rate limiting")
    rate_limit_max_requests: int = Field(
        default=100, ge=1, description="Requests allowed per window"
    )
    rate_limit_window_seconds: int = Field(
        default=900, ge=1, description="Rate limit window length"
    )

    # HTTP
    cors_origins: str = Field(default="*", description="Comma-separated allowed origins")
    host: str = Field(default="0.0.0.0", description="Bind host")
    port: int = Field(default=3000, description="Bind port")
    public_url: str = Field(
        default="",
        description="Base URL advertised in the API docs (defaults to localhost:port)",
    )

    # Application
    environment: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Environment name",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Logging level"
    )
    log_format: Literal["console", "json"] = Field(default="console", description="Log renderer")

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def cors_origin_list(self) -> list[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
