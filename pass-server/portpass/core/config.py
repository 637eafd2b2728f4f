"""Application configuration using pydantic settings with structured sections."""

from decimal import Decimal
from functools import lru_cache
from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class DatabaseSettings(BaseModel):
    url: str = Field(default="sqlite+aiosqlite:///./portpass.db", alias="url")
    echo: bool = False
    pool_size: Optional[int] = None
    max_overflow: Optional[int] = None


class SecuritySettings(BaseModel):
    # bcrypt accepts 4..31; each step doubles the hashing cost
    bcrypt_rounds: int = Field(default=10, ge=4, le=31)


class ReportSettings(BaseModel):
    # IANA zone name used for calendar-day windows; None means the host's local zone
    timezone: Optional[str] = None


class SeedSettings(BaseModel):
    enabled: bool = True
    username: str = "admin"
    password: str = "admin123"
    full_name: str = "System Administrator"
    designation: str = "Port Administrator"
    department: str = "Administration"


class PricingSettings(BaseModel):
    daily: Decimal = Decimal("6.11")
    vehicle: Decimal = Decimal("11.21")
    crane: Decimal = Decimal("16.31")
    trailer20: Decimal = Decimal("21.41")
    trailer40: Decimal = Decimal("26.51")


class LoggingSettings(BaseModel):
    level: str = "INFO"
    file: Optional[Path] = None
    max_bytes: int = 5 * 1024 * 1024
    backup_count: int = 10


class Settings(BaseSettings):
    """Top-level application settings with nested sections."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="PORTPASS_",
        env_nested_delimiter="__",
        extra="ignore",
        case_sensitive=False,
    )

    environment: Literal["development", "staging", "production", "test"] = "development"
    debug: bool = False
    project_name: str = "Port Pass Server"

    database: DatabaseSettings = DatabaseSettings()
    security: SecuritySettings = SecuritySettings()
    reports: ReportSettings = ReportSettings()
    seed: SeedSettings = SeedSettings()
    pricing: PricingSettings = PricingSettings()
    logging: LoggingSettings = LoggingSettings()

    @property
    def database_url(self) -> str:
        return self.database.url

    @property
    def bcrypt_rounds(self) -> int:
        return self.security.bcrypt_rounds

    @property
    def report_timezone(self) -> Optional[str]:
        return self.reports.timezone


@lru_cache()
def get_settings() -> Settings:
    return Settings()
