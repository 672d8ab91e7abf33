"""Application configuration management."""

from pydantic import ConfigDict, Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Database
    database_url: str = "sqlite+aiosqlite:///./database.db"
    database_echo: bool = False
    init_db_on_startup: bool = True
    seed_sample_data: bool = Field(
        default=True,
        description="Insert the demo programs, staff, cohorts and questions on startup",
    )

    # Logging
    log_level: str = "INFO"

    # CORS (comma-separated origins, "*" for any)
    cors_origins: str = "*"

    # Admissions
    strict_decisions: bool = Field(
        default=False,
        description="Reject unknown statuses and refusals without justification",
    )

    model_config = ConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @property
    def cors_origin_list(self) -> list[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


settings = Settings()
