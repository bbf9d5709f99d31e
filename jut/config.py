"""
Configuration management for jut
"""
from functools import lru_cache
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from jut.core.exceptions import ConfigurationError


class Settings(BaseSettings):
    """CLI settings loaded from environment variables"""

    # Logging
    log_level: str = Field(default="WARNING", alias="JUT_LOG_LEVEL")

    # Output
    no_color: bool = Field(default=False, alias="JUT_NO_COLOR")
    time_zone: str | None = Field(default=None, alias="JUT_TZ")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize and check the loguru level name"""
        level = v.strip().upper()
        if level not in {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log level: {v}")
        return level

    @field_validator("time_zone")
    @classmethod
    def validate_time_zone(cls, v: str | None) -> str | None:
        """Empty means local time; anything else must be an IANA zone name"""
        if v is None or not v.strip():
            return None
        try:
            ZoneInfo(v.strip())
        except (ZoneInfoNotFoundError, ValueError, OSError) as e:
            raise ValueError(f"unknown time zone: {v}") from e
        return v.strip()

    @property
    def tzinfo(self) -> ZoneInfo | None:
        """Display zone for claim times (None = local system zone)"""
        if self.time_zone is None:
            return None
        return ZoneInfo(self.time_zone)

    model_config = SettingsConfigDict(
        case_sensitive=False,
        env_ignore_empty=True,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """
    Load settings once per process

    Raises:
        ConfigurationError: If an environment variable holds an invalid value
    """
    try:
        return Settings()
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()
        )
        raise ConfigurationError(problems) from e
