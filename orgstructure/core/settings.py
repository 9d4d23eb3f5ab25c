"""
Settings management for the org-structure service (pydantic-settings based).

Every section reads from environment variables with its own prefix and is
immutable once loaded.

Usage:
    >>> from orgstructure.core.settings import get_settings
    >>> settings = get_settings()
    >>> settings.database_path
"""

from enum import Enum
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


# ==================== Environment ====================


class Environment(str, Enum):
    """Deployment environment."""

    DEVELOPMENT = "dev"
    STAGING = "staging"
    PRODUCTION = "prod"


# ==================== Headcount defaults ====================


class HeadcountSettings(BaseSettings):
    """Default inputs offered by the headcount calculator."""

    model_config = SettingsConfigDict(
        env_prefix="HEADCOUNT_",
        frozen=True,
    )

    work_orders: float = Field(default=1000, ge=0, description="Work orders per period")
    complaints: float = Field(default=500, ge=0, description="Complaints per period")
    time_period: Literal["week", "month"] = Field(default="month")
    hours_per_fte: float = Field(
        default=160, ge=0, description="Productive hours per FTE per month (40h x 4 weeks)"
    )
    manager_span: int = Field(default=8, ge=0, description="Average direct reports per manager")


# ==================== Application ====================


class AppSettings(BaseSettings):
    """Top-level application settings."""

    model_config = SettingsConfigDict(
        env_prefix="ORG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    app_name: str = Field(default="org-structure", description="Name stamped on every log entry")
    version: str = Field(default="1.0.0")
    environment: Environment = Field(default=Environment.DEVELOPMENT)
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(default="INFO")
    json_logs: bool | None = Field(
        default=None, description="JSON log output (None: JSON outside dev)"
    )

    project_root: Path = Field(default_factory=lambda: Path(__file__).parent.parent.parent)
    database_path: Path | None = Field(
        default=None,
        description="SQLite document database file (None: project_root/data/orgstructure.db)",
    )

    cors_origins: list[str] = Field(
        default_factory=lambda: [
            "http://localhost:5173",
            "http://localhost:5174",
            "http://localhost:3000",
        ]
    )

    headcount: HeadcountSettings = Field(default_factory=HeadcountSettings)

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_log_level(cls, v):
        return v.upper() if isinstance(v, str) else v

    @model_validator(mode="after")
    def set_defaults(self):
        """Fill derived defaults."""
        if self.database_path is None:
            object.__setattr__(self, "database_path", self.project_root / "data" / "orgstructure.db")
        if self.json_logs is None:
            object.__setattr__(self, "json_logs", self.environment != Environment.DEVELOPMENT)
        return self

    @property
    def is_production(self) -> bool:
        return self.environment == Environment.PRODUCTION


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    """
    Load settings once per process.

    Returns:
        Cached AppSettings instance
    """
    return AppSettings()


def reload_settings() -> AppSettings:
    """Drop the cached settings and read the environment again."""
    get_settings.cache_clear()
    return get_settings()
