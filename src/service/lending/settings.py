"""
Lending Settings for the contract payment calculator.

Environment variables use the LENDING_ prefix:
    LENDING_WEEKS_PER_YEAR=52
    LENDING_FOLIO_PREFIX=CTR-

Usage:
    from src.service.lending.settings import lending_settings

    # Use default settings (loaded from env)
    weeks = lending_settings.weeks_per_year

    # Or create custom settings for testing
    custom = LendingSettings(weeks_per_year=50)
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LendingSettings(BaseSettings):
    """Configurable parameters for contract pricing and folios."""

    model_config = SettingsConfigDict(
        env_prefix="LENDING_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    weeks_per_year: int = Field(
        default=52,
        description="Weeks used to turn an annual rate into a weekly rate",
    )
    display_decimals: int = Field(
        default=2,
        description="Decimal places used when presenting currency amounts",
    )
    folio_prefix: str = Field(
        default="CTR-",
        description="Literal prefix of every contract folio",
    )
    default_status: str = Field(
        default="activo",
        description="Status assigned to contracts created without one",
    )

    @field_validator("weeks_per_year")
    @classmethod
    def validate_weeks_per_year(cls, v: int) -> int:
        if v < 1:
            raise ValueError("weeks_per_year must be at least 1")
        return v


@lru_cache
def get_lending_settings() -> LendingSettings:
    """Get cached lending settings instance."""
    return LendingSettings()


lending_settings = get_lending_settings()
