"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - The store connection string comes from the environment (MONGOURI), never hardcoded
    - Missing MONGOURI is a startup failure (ConfigurationError), never a per-request one
    - get_settings() is cached (lru_cache) — single instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support (ADR: developer UX)
    - Defaults provided for all non-secret settings: works out-of-the-box with docker-compose
"""

from functools import lru_cache

from pydantic import AliasChoices, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from user_service.core.errors import ConfigurationError


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env", case_sensitive=False, extra="ignore",
    )

    # Document store
    mongo_uri: str = Field(
        validation_alias=AliasChoices("MONGOURI", "MONGO_URI", "mongo_uri"),
    )
    mongo_database: str = "userDB"
    mongo_collection: str = "User"
    store_timeout_ms: int = Field(default=5000, gt=0)

    @field_validator("mongo_uri")
    @classmethod
    def require_mongo_scheme(cls, v: str) -> str:
        """Reject values the driver would only fail on at first use."""
        v = v.strip()
        if not v.startswith(("mongodb://", "mongodb+srv://")):
            raise ValueError("MONGOURI must start with mongodb:// or mongodb+srv://")
        return v

    # API
    cors_origins: list[str] = ["*"]
    host: str = "0.0.0.0"
    port: int = 8080

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()


def load_settings() -> Settings:
    """Load settings for startup, surfacing problems as ConfigurationError."""
    try:
        return get_settings()
    except ValidationError as e:
        fields = ", ".join(
            ".".join(str(loc) for loc in err["loc"]) or "settings"
            for err in e.errors()
        )
        raise ConfigurationError(
            f"Invalid or missing configuration: {fields}", fields,
        ) from e
