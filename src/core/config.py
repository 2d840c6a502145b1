"""Dashboard settings read from environment variables.

Every value has a local default (SQLite file, bundled Casbin files, a
development token secret) so tests and local runs need no setup.

    from src.core.config import settings

    settings.max_page_size
    settings.authz_policy_path
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.core.enums import Environment

_AUTHORIZATION_DIR = Path(__file__).resolve().parent.parent / "infrastructure" / (
    "authorization"
)


class Settings(BaseSettings):
    """Flat settings; environment variables override the defaults below."""

    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="development, testing, ci or production",
    )
    debug: bool = Field(
        default=False,
        description="Force DEBUG logging and FastAPI debug mode",
    )
    log_level: str = Field(
        default="INFO",
        description="Minimum log level when debug is off",
    )

    app_name: str = Field(
        default="Marketing Dashboard",
        description="Shown by the root endpoint and OpenAPI",
    )
    app_version: str = Field(
        default="0.1.0",
        description="Shown by the root endpoint and OpenAPI",
    )

    database_url: str = Field(
        default="sqlite+aiosqlite:///./marketing.db",
        description="Async SQLAlchemy URL (postgresql+asyncpg://... in deployments)",
    )
    db_echo: bool = Field(
        default=False,
        description="Echo SQL statements",
    )

    api_base_url: str = Field(
        default="http://localhost:8000",
        description="Prefix of problem-details type URIs",
    )
    api_v1_prefix: str = Field(
        default="/api/v1",
        description="Mount point of the versioned routers",
    )

    default_page_size: int = Field(
        default=20,
        description="Page size used when a caller does not supply one",
    )
    max_page_size: int = Field(
        default=100,
        description="Largest page size a caller may request",
    )

    authz_model_path: str = Field(
        default=str(_AUTHORIZATION_DIR / "model.conf"),
        description="Casbin model definition",
    )
    authz_policy_path: str = Field(
        default=str(_AUTHORIZATION_DIR / "policy.csv"),
        description="Casbin CSV policy (role, resource, action rules)",
    )

    identity_jwt_secret: str = Field(
        default="change-me-local-identity-secret-0123456789",
        description="Shared secret verifying identity provider access tokens",
    )
    identity_jwt_algorithm: str = Field(
        default="HS256",
        description="Signature algorithm of identity provider access tokens",
    )
    identity_jwt_audience: str | None = Field(
        default=None,
        description="Expected 'aud' claim; None skips the audience check",
    )
    identity_role_claim: str = Field(
        default="user_role",
        description="Token claim carrying the caller's dashboard role",
    )

    notification_timeout_seconds: float = Field(
        default=5.0,
        description="Upper bound for one notification write",
    )

    model_config = SettingsConfigDict(
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("default_page_size", "max_page_size")
    @classmethod
    def validate_page_size(cls, v: int) -> int:
        if v < 1:
            raise ValueError("page sizes must be >= 1")
        return v

    @field_validator("notification_timeout_seconds")
    @classmethod
    def validate_notification_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("notification_timeout_seconds must be > 0")
        return v

    @field_validator("api_base_url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """Problem type URIs are built as f"{api_base_url}/errors/..."."""
        return v.rstrip("/")

    @model_validator(mode="after")
    def validate_page_size_bounds(self) -> "Settings":
        if self.default_page_size > self.max_page_size:
            raise ValueError("default_page_size must not exceed max_page_size")
        return self

    @property
    def is_development(self) -> bool:
        """Colored console logs and the /config endpoint."""
        return self.environment == Environment.DEVELOPMENT

    @property
    def is_testing(self) -> bool:
        return self.environment == Environment.TESTING

    @property
    def is_production(self) -> bool:
        return self.environment == Environment.PRODUCTION


@lru_cache
def get_settings() -> Settings:
    """Settings are parsed once per process."""
    return Settings()


settings = get_settings()
