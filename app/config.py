"""Application configuration."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Settings are loaded in this priority order (highest to lowest):
    1. Environment variables
    2. .env file (for local development)
    3. Default values

    For local development, copy .env.example to .env and fill in your values.
    For production, set environment variables directly.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # =========================================================================
    # Application
    # =========================================================================
    app_name: str = "Civic Scorecard API"
    debug: bool = False

    # =========================================================================
    # CORS
    # =========================================================================
    cors_origins: list[str] = ["http://localhost:3000"]

    # =========================================================================
    # API Settings
    # =========================================================================
    api_v1_prefix: str = "/api/v1"

    # =========================================================================
    # External API Keys
    # =========================================================================
    # OpenStates v3 API (https://open.pluralpolicy.com/accounts/profile/)
    # Required for: roster lookup, session discovery, bills with roll-call votes
    openstates_api_key: str | None = Field(
        default=None,
        description="OpenStates v3 API key",
    )
    openstates_base_url: str = Field(
        default="https://v3.openstates.org",
        description="OpenStates v3 API root",
    )

    # =========================================================================
    # Upstream HTTP behaviour
    # =========================================================================
    request_timeout: float = Field(
        default=10.0,
        gt=0,
        description="Per-call timeout in seconds for OpenStates requests",
    )
    # A failed session probe is skipped, not retried, so one attempt is the default.
    max_retries: int = Field(default=1, ge=1)
    retry_delay: float = Field(default=2.0, ge=0)

    # =========================================================================
    # Reconciliation
    # =========================================================================
    roster_page_size: int = Field(default=5, ge=1, le=50)
    harvest_page_size: int = Field(default=20, ge=1, le=50)
    harvest_max_pages: int = Field(
        default=1,
        ge=1,
        description="Consecutive bill pages read per session probe",
    )
    max_session_candidates: int = Field(default=3, ge=1)
    fallback_sessions: list[str] = Field(
        default=["2025", "83rd2025", "82nd2023"],
        description="Session identifiers used when session metadata is unavailable",
    )
    default_jurisdiction: str = "Nevada"


settings = Settings()
